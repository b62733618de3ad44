"""Base rule provider: phone, tablet, OS, browser and property tables.

The bundled `MobileDetect` carries a trimmed transcription of the
Mobile_Detect rule set. Any object with the same table attributes and request
accessors (see `BaseRuleProvider`) can be handed to `Agent` instead.
"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType
from typing import Any, Protocol


CLOUDFRONT_USER_AGENT = "Amazon CloudFront"
CLOUDFRONT_HEADER_PREFIX = "HTTP_CLOUDFRONT_IS_"

# Headers that may carry the user agent, concatenated in this order.
UA_HTTP_HEADERS = (
    "HTTP_USER_AGENT",
    "HTTP_X_OPERAMINI_PHONE_UA",
    "HTTP_X_DEVICE_USER_AGENT",
    "HTTP_X_ORIGINAL_USER_AGENT",
    "HTTP_X_SKYFIRE_PHONE",
    "HTTP_X_BOLT_PHONE_UA",
    "HTTP_DEVICE_STOCK_UA",
    "HTTP_X_UCBROWSER_DEVICE_UA",
)

# Presence alone marks a mobile client unless a list of substrings is given.
MOBILE_HEADERS: Mapping[str, tuple[str, ...] | None] = MappingProxyType({
    "HTTP_ACCEPT": (
        "application/x-obml2d",
        "application/vnd.rim.html",
        "text/vnd.wap.wml",
        "application/vnd.wap.xhtml+xml",
    ),
    "HTTP_X_WAP_PROFILE": None,
    "HTTP_X_WAP_CLIENTID": None,
    "HTTP_WAP_CONNECTION": None,
    "HTTP_PROFILE": None,
    "HTTP_X_OPERAMINI_PHONE_UA": None,
    "HTTP_X_NOKIA_GATEWAY_ID": None,
    "HTTP_X_ORANGE_ID": None,
    "HTTP_X_VODAFONE_3GPDPCONTEXT": None,
    "HTTP_X_HUAWEI_USERID": None,
    "HTTP_UA_OS": None,
    "HTTP_X_MOBILE_GATEWAY": None,
    "HTTP_X_ATT_DEVICEID": None,
    "HTTP_UA_CPU": ("ARM",),
})


class BaseRuleProvider(Protocol):
    """What the classifier needs from a base detection rule set."""

    phone_devices: Mapping[str, Any]
    tablet_devices: Mapping[str, Any]
    operating_systems: Mapping[str, Any]
    browsers: Mapping[str, Any]
    properties: Mapping[str, Any]

    @property
    def user_agent(self) -> str | None: ...

    @property
    def http_headers(self) -> Mapping[str, str]: ...

    def has_mobile_headers(self) -> bool: ...


class MobileDetect:
    """Default base rule provider for one request."""

    phone_devices: Mapping[str, Any] = MappingProxyType({
        "iPhone": r"\biPhone\b|\biPod\b",
        "BlackBerry": r"BlackBerry|\bBB10\b|rim[0-9]+",
        "Pixel": r"; \bPixel\b",
        "HTC": (
            r"HTC|HTC.*(Sensation|Evo|Vision|Explorer|6800|8100|8900|A7272|S510e|C110e|Legend|Desire|T8282)"
            r"|APX515CKT|Qtek9090|APA9292KT|HD_mini|Sensation.*Z710e|PG86100|Z715e|Desire.*(A8181|HD)"
            r"|ADR6200|ADR6400L|ADR6425|001HT|Inspire 4G|Android.*\bEVO\b|T-Mobile G1|Z520m"
        ),
        "Nexus": r"Nexus One|Nexus S|Galaxy.*Nexus|Android.*Nexus.*Mobile|Nexus 4|Nexus 5|Nexus 6",
        "Dell": r"Dell[;]? (Streak|Aero|Venue|Venue Pro|Flash|Smoke|Mini 3iX)|XCD28|XCD35|\b001DL\b|\b101DL\b|\bGS01\b",
        "Motorola": r"Motorola|DROIDX|DROID BIONIC|\bDroid\b.*Build|Android.*Xoom|HRI39|MOT-|\bMoto [A-Z]\b|XT1[0-9]{3}",
        "Samsung": (
            r"\bSamsung\b|SM-G[0-9]{3}[A-Z]?|SM-N9[0-9]{2}|SM-A[0-9]{3}|GT-I9[0-9]{3}|GT-S[0-9]{4}"
            r"|SGH-[A-Z][0-9]{3}|SCH-[A-Z][0-9]{3}|SPH-[A-Z][0-9]{3}"
        ),
        "LG": (
            r"\bLG\b;|LG[- ]?(C800|C900|E400|E610|E900|E-900|F160|F180K|F180L|F180S|730|855|L160|LS740"
            r"|LS840|LS970|LU6200|MS690|MS695|MS770|MS840|MS870|MS910|P500|P700|P705|VM696|AS680|AS695"
            r"|AX840|C729|E970|GS505|272|C395|E739BK|E960|L55C|L75C|LS696|LS860|P769BK|P350|P509|P870"
            r"|UN272|US730|VS840|VS950|LN272|LN510|LS670|LS855|LW690|MN270|MN510|P769|P930|UN200|UN270"
            r"|UN510|UN610|US670|US740|US760|UX265|UX840|VN271|VN530|VS660|VS700|VS740|VS750|VS910"
            r"|VS920|VS930|VX9200|VX11000|AX840A|LW770|P506|P925|P999|E612|D955|D802|MS323|M257)"
        ),
        "Sony": (
            r"SonyST|SonyLT|SonyEricsson|SonyEricssonLT15iv|LT18i|E10i|LT28h|LT26w|SonyEricssonMT27i"
            r"|C5303|C6902|C6903|C6906|C6943|D2533|SOV34|601SO|F8332"
        ),
        "Asus": r"Asus.*Galaxy|PadFone.*Mobile",
        "Xiaomi": r"Xiaomi|\bRedmi\b|POCOPHONE",
        "NokiaLumia": r"Lumia [0-9]{3,4}",
        "Palm": r"PalmSource|Palm",
        "OnePlus": r"ONEPLUS A[0-9]{4}|ONEPLUS [A-Z]{2}[0-9]{4}",
        "GenericPhone": (
            r"Tapatalk|PDA;|SAGEM|\bmmp\b|pocket|\bpsp\b|symbian|Smartphone|smartfon|treo|up.browser"
            r"|up.link|vodafone|\bwap\b|nokia|Series40|Series60|S60|SonyEricsson|N900|MAUI.*WAP.*Browser"
        ),
    })

    tablet_devices: Mapping[str, Any] = MappingProxyType({
        "iPad": r"iPad|iPad.*Mobile",
        "NexusTablet": r"Android.*Nexus[\s]+(7|9|10)",
        "GoogleTablet": r"Android.*Pixel C",
        "SamsungTablet": (
            r"SAMSUNG.*Tablet|Galaxy.*Tab|SC-01C|SM-T[0-9]{3}[A-Z]?|SM-P[0-9]{3}|SM-X[0-9]{3}"
            r"|GT-P[0-9]{4}|GT-N5[0-9]{3}|GT-N8[0-9]{3}"
        ),
        "Kindle": (
            r"Kindle|Silk.*Accelerated|Android.*\b(KFOT|KFTT|KFJWI|KFJWA|KFOTE|KFSOWI|KFTHWI|KFTHWA"
            r"|KFAPWI|KFAPWA|WFJWAE|KFSAWA|KFSAWI|KFASWI|KFARWI|KFFOWI|KFGIWI|KFMEWI)\b"
            r"|Android.*Silk/[0-9.]+ like Chrome/[0-9.]+ (?!Mobile)"
        ),
        "SurfaceTablet": r"Windows NT [0-9.]+; ARM;.*(Tablet|ARMBJS)",
        "HPTablet": r"HP Slate (7|8|10)|HP ElitePad 900|hp-tablet|EliteBook.*Touch|HP 8|Slate 21|HP SlateBook 10",
        "AsusTablet": (
            r"Transformer|TF101|TF300T|TF700T|TF701T|ME301T|ME302C|ME371MG|ME173X|ME400C|\bK00F\b"
            r"|\bK00C\b|\bK00E\b|\bK00L\b|ME176C|ME102A|\bM80TA\b|\bP00C\b|\bP027\b|\bP024\b"
        ),
        "BlackBerryTablet": r"PlayBook|RIM Tablet",
        "HTCtablet": r"HTC_Flyer_P512|HTC Flyer|HTC Jetstream|HTC-P715a|HTC EVO View 4G|PG41200|PG09410",
        "MotorolaTablet": r"xoom|sholest|MZ615|MZ605|MZ505|MZ601|MZ602|MZ603|MZ604|MZ606|MZ607|MZ608|MZ609|MZ616|MZ617",
        "NookTablet": r"Android.*Nook|NookColor|nook browser|BNRV200|BNRV200A|BNTV250|BNTV250A|BNTV400|BNTV600|LogicPD Zoom2",
        "LenovoTablet": (
            r"Lenovo TAB|Idea(Tab|Pad)( A1|A10| K1|)|ThinkPad([ ]+)?Tablet|YT3-X90L|YT3-X90F|YT3-X90X"
            r"|TB-X103F|TB-X304F|TB-X304L|TB-8703F|Tab2A7-10F|TB2-X30L"
        ),
        "SonyTablet": (
            r"Sony.*Tablet|Xperia Tablet|Sony Tablet S|SO-03E|SGPT12|SGPT13|SGPT114|SGPT121|SGPT122"
            r"|SGPT123|SGPT111|SGPT112|SGPT113|SGPT131|SGPT132|SGPT133|SGPT211|SGPT212|SGPT213|SGP311"
            r"|SGP312|SGP321|SGP351|SGP341|SGP511|SGP512|SGP521|SGP541|SGP551|SGP621|SGP641|SGP612"
            r"|SOT31|SGP771|SGP611|SGP712"
        ),
        "HuaweiTablet": (
            r"MediaPad|MediaPad 7 Youth|IDEOS S7|S7-201c|S7-202u|S7-101|S7-103|S7-104|S7-105|S7-106"
            r"|S7-201|S7-Slim|M2-A01L|BAH-L09|BAH-W09|AGS-L09|CMR-AL19"
        ),
        "PlaystationTablet": r"Playstation.*(Portable|Vita)",
        "GenericTablet": (
            r"Android.*\b97D\b|Tablet(?!.*PC)|BNTV250A|MID-WCDMA|LogicPD Zoom2|\bA7EB\b|CatNova8|A1_07"
            r"|CT704|CT1002|\bM721\b|rk30sdk|\bEVOTAB\b|M758A|ET904|ALUMIUM10|Smartfren Tab|Endeavour 1010"
            r"|Tablet-PC-4|Tagi Tab|\bM6pro\b|CT1020W|arc 10HD|\bTP750\b|\bQTAQZ3\b|WVT101|TM1088|KT107"
        ),
    })

    operating_systems: Mapping[str, Any] = MappingProxyType({
        "AndroidOS": r"Android",
        "BlackBerryOS": r"blackberry|\bBB10\b|rim tablet os",
        "PalmOS": r"PalmOS|avantgo|blazer|elaine|hiptop|palm|plucker|xiino",
        "SymbianOS": r"Symbian|SymbOS|Series60|Series40|SYB-[0-9]+|\bS60\b",
        "WindowsMobileOS": r"Windows CE.*(PPC|Smartphone|Mobile|[0-9]{3}x[0-9]{3})|Windows Mobile|Windows Phone [0-9.]+|WCE;",
        "WindowsPhoneOS": (
            r"Windows Phone 10.0|Windows Phone 8.1|Windows Phone 8.0|Windows Phone OS|XBLWP7|ZuneWP7"
            r"|Windows NT 6.[23]; ARM;"
        ),
        "iOS": r"\biPhone.*Mobile|\biPod|\biPad|AppleCoreMedia",
        "iPadOS": r"CPU OS 13",
        "SailfishOS": r"Sailfish",
        "MeeGoOS": r"MeeGo",
        "MaemoOS": r"Maemo",
        "JavaOS": r"J2ME/|\bMIDP\b|\bCLDC\b",
        "webOS": r"webOS|hpwOS",
        "badaOS": r"\bBada\b",
        "BREWOS": r"BREW",
    })

    browsers: Mapping[str, Any] = MappingProxyType({
        "Vivaldi": r"Vivaldi",
        "Chrome": r"\bCrMo\b|CriOS|Android.*Chrome/[.0-9]* (Mobile)?",
        "Dolfin": r"\bDolfin\b",
        "Opera": r"Opera.*Mini|Opera.*Mobi|Android.*Opera|Mobile.*OPR/[0-9.]+$|Coast/[0-9.]+",
        "Skyfire": r"Skyfire",
        "Edge": r"Mobile Safari/[.0-9]* Edge",
        "IE": r"IEMobile|MSIEMobile",
        "Firefox": r"fennec|firefox.*maemo|(Mobile|Tablet).*Firefox|Firefox.*Mobile|FxiOS",
        "Bolt": r"bolt",
        "TeaShark": r"teashark",
        "Blazer": r"Blazer",
        "Safari": r"Version((?!\bEdgiOS\b).)*Mobile.*Safari|Safari.*Mobile|MobileSafari",
        "WeChat": r"\bMicroMessenger\b",
        "UCBrowser": r"UC.*Browser|UCWEB",
        "baiduboxapp": r"baiduboxapp",
        "baidubrowser": r"baidubrowser",
        "DiigoBrowser": r"DiigoBrowser",
        "Mercury": r"\bMercury\b",
        "ObigoBrowser": r"Obigo",
        "NetFront": r"NF-Browser",
        "GenericBrowser": (
            r"NokiaBrowser|OviBrowser|OneBrowser|TwonkyBeamBrowser|SEMC.*Browser|FlyFlow|Minimo"
            r"|NetFront|Novarra-Vision|MQQBrowser|MicroMessenger"
        ),
        "PaleMoon": r"Android.*PaleMoon|Mobile.*PaleMoon",
    })

    properties: Mapping[str, Any] = MappingProxyType({
        # Build
        "Mobile": "Mobile/[VER]",
        "Build": "Build/[VER]",
        "Version": "Version/[VER]",
        "VendorID": "VendorID/[VER]",
        # Devices
        "iPad": "iPad.*CPU[a-z ]+[VER]",
        "iPhone": "iPhone.*CPU[a-z ]+[VER]",
        "iPod": "iPod.*CPU[a-z ]+[VER]",
        "Kindle": "Kindle/[VER]",
        # Browsers
        "Chrome": [" Chrome/[VER]", "CriOS/[VER]", "CrMo/[VER]"],
        "Coast": ["Coast/[VER]"],
        "Dolfin": "Dolfin/[VER]",
        "Firefox": ["Firefox/[VER]", "FxiOS/[VER]"],
        "Fennec": "Fennec/[VER]",
        "Edge": "Edge/[VER]",
        "IE": ["IEMobile/[VER];", "IEMobile [VER]", "MSIE [VER];", r"Trident/[0-9.]+;.*rv:[VER]"],
        "NetFront": "NetFront/[VER]",
        "NokiaBrowser": "NokiaBrowser/[VER]",
        "Opera": [" OPR/[VER]", "Opera Mini/[VER]", "Version/[VER]"],
        "Opera Mini": "Opera Mini/[VER]",
        "Opera Mobi": "Version/[VER]",
        "UCBrowser": ["UCWEB[VER]", "UC.*Browser/[VER]"],
        "MQQBrowser": "MQQBrowser/[VER]",
        "MicroMessenger": "MicroMessenger/[VER]",
        "baiduboxapp": "baiduboxapp/[VER]",
        "baidubrowser": "baidubrowser/[VER]",
        "SamsungBrowser": "SamsungBrowser/[VER]",
        "Iron": "Iron/[VER]",
        "Safari": ["Version/[VER]", "Safari/[VER]"],
        "Skyfire": "Skyfire/[VER]",
        "Tizen": "Tizen/[VER]",
        "Webkit": "webkit[ /][VER]",
        "PaleMoon": "PaleMoon/[VER]",
        "SailfishBrowser": "SailfishBrowser/[VER]",
        # Engines
        "Gecko": "Gecko/[VER]",
        "Trident": "Trident/[VER]",
        "Presto": "Presto/[VER]",
        "Goanna": "Goanna/[VER]",
        # Operating systems
        "iOS": r" \bi?OS\b [VER][ ;]{1}",
        "Android": "Android [VER]",
        "Sailfish": "Sailfish [VER]",
        "BlackBerry": [r"BlackBerry[\w]+/[VER]", "BlackBerry.*Version/[VER]", "Version/[VER]"],
        "BREW": "BREW [VER]",
        "Java": "Java/[VER]",
        "Windows Phone OS": ["Windows Phone OS [VER]", "Windows Phone [VER]"],
        "Windows Phone": "Windows Phone [VER]",
        "Windows CE": "Windows CE/[VER]",
        "Windows NT": "Windows NT [VER]",
        "Symbian": ["SymbianOS/[VER]", "Symbian/[VER]"],
        "webOS": ["webOS/[VER]", "hpwOS/[VER];"],
    })

    def __init__(
        self,
        headers: Mapping[str, str] | None = None,
        user_agent: str | None = None,
        max_length: int = 500,
    ) -> None:
        self._max_length = max_length
        self._http_headers = MappingProxyType({
            key: value
            for key, value in (headers or {}).items()
            if key.startswith("HTTP_")
        })
        self._user_agent = self._resolve_user_agent(user_agent)

    def _prepare(self, user_agent: str) -> str:
        return user_agent.strip()[: self._max_length]

    def _resolve_user_agent(self, user_agent: str | None) -> str | None:
        if user_agent:
            return self._prepare(user_agent)

        found = [self._http_headers[name] for name in UA_HTTP_HEADERS if self._http_headers.get(name)]
        if found:
            return self._prepare(" ".join(found))

        # CloudFront strips the user agent and sends its own device headers instead.
        if self.cloudfront_headers:
            return CLOUDFRONT_USER_AGENT

        return None

    @property
    def user_agent(self) -> str | None:
        return self._user_agent

    @property
    def http_headers(self) -> Mapping[str, str]:
        return self._http_headers

    @property
    def cloudfront_headers(self) -> dict[str, str]:
        return {
            key: value
            for key, value in self._http_headers.items()
            if key.startswith(CLOUDFRONT_HEADER_PREFIX)
        }

    def has_mobile_headers(self) -> bool:
        """Check for headers only mobile gateways and browsers send."""
        for header, matches in MOBILE_HEADERS.items():
            value = self._http_headers.get(header)
            if value is None:
                continue
            if matches is None:
                return True
            if any(match in value for match in matches):
                return True
        return False
