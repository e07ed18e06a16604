import logging

import pytest

import main
from catalogscope.services.settings import Theme


def test_parse_defaults():
    args = main.parse_arguments([])
    assert args.theme is None
    assert args.log_level == "INFO"
    assert args.animate_scroll is True
    assert args.debug is False


def test_parse_options():
    args = main.parse_arguments(["--theme", "dark", "--no-animation", "--log-level", "WARNING"])
    assert args.theme == Theme.DARK
    assert args.animate_scroll is False
    assert args.log_level == "WARNING"


def test_verbose_and_debug_force_debug_level():
    assert main.parse_arguments(["-v"]).log_level == "DEBUG"
    assert main.parse_arguments(["--debug"]).log_level == "DEBUG"


def test_version_exits(capsys):
    with pytest.raises(SystemExit):
        main.parse_arguments(["--version"])
    assert main.APP_VERSION in capsys.readouterr().out


def test_build_settings_applies_arguments():
    settings = main.build_settings(main.CommandLineArgs(theme=Theme.DARK, animate_scroll=False))
    assert settings.ui.theme == Theme.DARK
    assert settings.scroll.animate is False


def test_setup_logging_with_file(tmp_path):
    root = logging.getLogger()
    saved = list(root.handlers), root.level
    try:
        log_file = tmp_path / "logs" / "app.log"
        logger = main.setup_logging("DEBUG", log_file)
        assert logger.level == logging.DEBUG
        assert len(logger.handlers) == 2
        logging.debug("hello from test")
        for handler in logger.handlers:
            handler.flush()
        assert "hello from test" in log_file.read_text(encoding="utf-8")
    finally:
        for handler in root.handlers:
            handler.close()
        root.handlers[:] = saved[0]
        root.setLevel(saved[1])


def test_log_formatter_without_colors():
    formatter = main.LogFormatter(use_colors=False)
    record = logging.LogRecord("x", logging.WARNING, __file__, 1, "careful", None, None)
    text = formatter.format(record)
    assert "WARNING" in text
    assert "careful" in text
    assert "\033[" not in text


def test_exception_handler_logs(caplog):
    handler = main.ExceptionHandler(logging.getLogger("test"))
    try:
        raise ValueError("boom")
    except ValueError as exc:
        with caplog.at_level(logging.CRITICAL):
            handler.handle_exception(type(exc), exc, exc.__traceback__)
    assert "Unhandled exception" in caplog.text


def test_exception_handler_shows_traceback_dialog(qapp, monkeypatch):
    shown = []
    monkeypatch.setattr(
        main.QMessageBox, "exec",
        lambda dialog: shown.append((dialog.text(), dialog.detailedText())) or 0
    )

    handler = main.ExceptionHandler(logging.getLogger("test"))
    handler.set_application(qapp)
    try:
        raise RuntimeError("broken")
    except RuntimeError as exc:
        handler.handle_exception(type(exc), exc, exc.__traceback__)

    assert len(shown) == 1
    text, detail = shown[0]
    assert text == "RuntimeError: broken"
    assert "Traceback" in detail
    assert "raise RuntimeError" in detail


def test_dark_theme_palette(qapp):
    saved = qapp.palette()
    try:
        main._apply_dark_theme(qapp)
        palette = qapp.palette()
        assert palette.color(main.QPalette.ColorRole.Base) == main.QColor(35, 35, 35)
        disabled = palette.color(main.QPalette.ColorGroup.Disabled, main.QPalette.ColorRole.Text)
        assert disabled == main.QColor(127, 127, 127)
    finally:
        qapp.setPalette(saved)
