"""
Bundled catalog text.

The text is kept exactly as delivered upstream, including its
formatting defects (missing semicolons, doubled separators, stray
whitespace). The tokenizer recovers the identifiers from it.
"""

CATALOG_TEXT = """\
ABX-1001; ABX-1002; ABX-1003;ABX-1004
ABX-1005;ABX-1006 ABX-1007; ABX-1008
CRN-2001; CRN-2002;; CRN-2003 ; CRN-2004
CRN-2005 CRN-2006;CRN-2007;CRN-2008;
DLT-3001; DLT-3002; dlt-3003; DLT3004
DLT-3005;DLT-3006;DLT-3007 DLT-3008
EVX-4001 ; EVX-4002; EVX_4003;EVX-4004
EVX-4005; EVX-4006;EVX-4007;EVX-4008 EVX-4009
FMR-5001;FMR-5002; FMR-5003; FMR-5004
 FMR-5005 ;FMR-5006;FMR-5007 FMR-5008;FMR-5009
GLN-6001; GLN-6002; GLN-6003; GLN-6004
GLN-6005;GLN-6006;;GLN-6007;GLN-6008
HPX-7001; HPX-7002 HPX-7003; HPX-7004; HPX--7005
HPX-7006;HPX-7007;HPX-7008;HPX-7009;HPX-7010
JTR-8001; JTR-8002; JTR-8003; JTR-8004;
JTR-8005 JTR-8006; JTR-8007;JTR-8008
KLM-9001; KLM-9002; KLM-9003; KLM-9004 KLM-9005
KLM-9006;KLM-9007;KLM-9008;KLM-9009;KLM-9010
"""
