from enum import Enum

class Theme(str, Enum):
    # Declaration order is the tie-break priority for investor top themes
    AI = "AI"
    CLIMATE = "Climate"
    FINTECH = "Fintech"
    HEALTHCARE = "Healthcare"
    SAAS = "SaaS"
    CONSUMER = "Consumer"

class ScoreCategory(str, Enum):
    FUNDING = "funding"
    OPERATIONS = "operations"
    BRAND_TREND = "brandTrend"
    POTENTIAL = "potential"
    COMPREHENSIVE = "comprehensive"

class StatusTag(str, Enum):
    CLOSED = "closed"        # Company has shut down
    ACQUIRED = "acquired"    # Company was bought or exited

class IntelContext(str, Enum):
    COMPANY = "company"
    INVESTOR = "investor"
