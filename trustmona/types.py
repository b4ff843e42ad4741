from enum import Enum

class RiskLevel(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"

class StatusLabel(str, Enum):
    HIGH_RISK = "high-risk"
    MEDIUM_RISK = "medium-risk"
    LOW_RISK = "low-risk"

class ScanType(str, Enum):
    URL = "url"
    TEXT = "text"

class ConfigCat(str, Enum):
    DOMAIN = "domain"
    MODEL = "model"
    STATUS = "status"

class LookupSource(str, Enum):
    WHOISXML = "whoisxml"
    RDAP = "rdap"
    WHOIS = "whois"
