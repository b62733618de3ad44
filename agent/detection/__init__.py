"""Rule tables, matching and parsing used by the Agent facade."""

from .crawler import CrawlerDetectProvider, CrawlerProvider, get_crawler_provider
from .languages import parse_languages
from .matcher import assemble_pattern, find_first_match
from .mobile_detect import BaseRuleProvider, MobileDetect
from .rules import DetectionRules, RuleTable, build_detection_rules, default_detection_rules, merge_rules
from .versions import VersionType, extract_version, normalize_version

__all__ = [
    "BaseRuleProvider",
    "CrawlerDetectProvider",
    "CrawlerProvider",
    "DetectionRules",
    "MobileDetect",
    "RuleTable",
    "VersionType",
    "assemble_pattern",
    "build_detection_rules",
    "default_detection_rules",
    "extract_version",
    "find_first_match",
    "get_crawler_provider",
    "merge_rules",
    "normalize_version",
    "parse_languages",
]
