from catalogscope.services.settings import Theme, ViewerSettings


def test_theme_from_string():
    assert Theme.from_string("dark") == Theme.DARK
    assert Theme.from_string("LIGHT") == Theme.LIGHT
    assert Theme.from_string("neon") == Theme.SYSTEM
    assert Theme.from_string(None) == Theme.SYSTEM


def test_defaults():
    settings = ViewerSettings()
    assert settings.ui.theme == Theme.LIGHT
    assert settings.scroll.animate is True
    assert settings.colors.locked_background == "#dafbe1"


def test_instances_do_not_share_groups():
    first = ViewerSettings()
    second = ViewerSettings()
    first.ui.theme = Theme.DARK
    first.scroll.animate = False
    assert second.ui.theme == Theme.LIGHT
    assert second.scroll.animate is True
