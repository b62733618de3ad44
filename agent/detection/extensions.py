"""Rules layered on top of the base provider's tables.

Order within each table is precedence: Edge and Opera must be checked
before Chrome, which must be checked before Safari and Mozilla.
"""

DESKTOP_DEVICES = {
    "Macintosh": "Macintosh",
}

ADDITIONAL_OPERATING_SYSTEMS = {
    "Windows": "Windows",
    "Windows NT": "Windows NT",
    "OS X": "Mac OS X",
    "Debian": "Debian",
    "Ubuntu": "Ubuntu",
    "Macintosh": "PPC",
    "OpenBSD": "OpenBSD",
    "Linux": "Linux",
    "ChromeOS": "CrOS",
}

ADDITIONAL_BROWSERS = {
    "Opera Mini": "Opera Mini",
    "Opera": "Opera|OPR",
    "Edge": "Edge|Edg",
    "Coc Coc": "coc_coc_browser",
    "UCBrowser": "UCBrowser",
    "Vivaldi": "Vivaldi",
    "Chrome": "Chrome",
    "Firefox": "Firefox",
    "Safari": "Safari",
    "IE": r"MSIE|IEMobile|MSIEMobile|Trident/[.0-9]+",
    "Netscape": "Netscape",
    "Mozilla": "Mozilla",
    "WeChat": "MicroMessenger",
}

# [VER] is replaced by a capturing group when a version is extracted.
ADDITIONAL_PROPERTIES = {
    # Operating systems
    "Windows": "Windows NT [VER]",
    "Windows NT": "Windows NT [VER]",
    "OS X": "OS X [VER]",
    "BlackBerryOS": [r"BlackBerry[\w]+/[VER]", "BlackBerry.*Version/[VER]", "Version/[VER]"],
    "AndroidOS": "Android [VER]",
    "ChromeOS": "CrOS x86_64 [VER]",
    # Browsers
    "Opera Mini": "Opera Mini/[VER]",
    "Opera": [" OPR/[VER]", "Opera Mini/[VER]", "Version/[VER]", "Opera [VER]"],
    "Netscape": "Netscape/[VER]",
    "Mozilla": "rv:[VER]",
    "IE": ["IEMobile/[VER];", "IEMobile [VER]", "MSIE [VER];", "rv:[VER]"],
    "Edge": ["Edge/[VER]", "Edg/[VER]"],
    "Vivaldi": "Vivaldi/[VER]",
    "Coc Coc": "coc_coc_browser/[VER]",
}
