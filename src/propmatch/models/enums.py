"""
Vocabularios canónicos de enums.

Son los tokens exactos (en mayúsculas) que espera el esquema de
persistencia. Las tablas de alias del importador y los modelos de
matching apuntan siempre a estos valores.
"""

from enum import Enum


class PropertyType(str, Enum):
    RESIDENTIAL = "RESIDENTIAL"
    COMMERCIAL = "COMMERCIAL"
    LAND = "LAND"
    RENTAL = "RENTAL"
    VACATION = "VACATION"
    APARTMENT = "APARTMENT"
    HOUSE = "HOUSE"
    MAISONETTE = "MAISONETTE"
    WAREHOUSE = "WAREHOUSE"
    PARKING = "PARKING"
    PLOT = "PLOT"
    FARM = "FARM"
    INDUSTRIAL = "INDUSTRIAL"
    OTHER = "OTHER"


class PropertyStatus(str, Enum):
    ACTIVE = "ACTIVE"
    PENDING = "PENDING"
    SOLD = "SOLD"
    OFF_MARKET = "OFF_MARKET"
    WITHDRAWN = "WITHDRAWN"


class TransactionType(str, Enum):
    SALE = "SALE"
    RENTAL = "RENTAL"
    SHORT_TERM = "SHORT_TERM"
    EXCHANGE = "EXCHANGE"


class HeatingType(str, Enum):
    AUTONOMOUS = "AUTONOMOUS"
    CENTRAL = "CENTRAL"
    NATURAL_GAS = "NATURAL_GAS"
    HEAT_PUMP = "HEAT_PUMP"
    ELECTRIC = "ELECTRIC"
    NONE = "NONE"


class EnergyCertClass(str, Enum):
    A_PLUS = "A_PLUS"
    A = "A"
    B = "B"
    C = "C"
    D = "D"
    E = "E"
    F = "F"
    G = "G"
    H = "H"
    IN_PROGRESS = "IN_PROGRESS"


class PropertyCondition(str, Enum):
    EXCELLENT = "EXCELLENT"
    VERY_GOOD = "VERY_GOOD"
    GOOD = "GOOD"
    NEEDS_RENOVATION = "NEEDS_RENOVATION"


class FurnishedStatus(str, Enum):
    NO = "NO"
    PARTIALLY = "PARTIALLY"
    FULLY = "FULLY"


class PriceType(str, Enum):
    RENTAL = "RENTAL"
    SALE = "SALE"
    PER_ACRE = "PER_ACRE"
    PER_SQM = "PER_SQM"


class PortalVisibility(str, Enum):
    PRIVATE = "PRIVATE"
    SELECTED = "SELECTED"
    PUBLIC = "PUBLIC"


class AddressPrivacyLevel(str, Enum):
    EXACT = "EXACT"
    PARTIAL = "PARTIAL"
    HIDDEN = "HIDDEN"


class LegalizationStatus(str, Enum):
    LEGALIZED = "LEGALIZED"
    IN_PROGRESS = "IN_PROGRESS"
    UNDECLARED = "UNDECLARED"


class ClientType(str, Enum):
    BUYER = "BUYER"
    SELLER = "SELLER"
    RENTER = "RENTER"
    INVESTOR = "INVESTOR"
    REFERRAL_PARTNER = "REFERRAL_PARTNER"


class ClientStatus(str, Enum):
    LEAD = "LEAD"
    ACTIVE = "ACTIVE"
    INACTIVE = "INACTIVE"
    CONVERTED = "CONVERTED"
    LOST = "LOST"


class PersonType(str, Enum):
    INDIVIDUAL = "INDIVIDUAL"
    COMPANY = "COMPANY"
    INVESTOR = "INVESTOR"
    BROKER = "BROKER"


class ClientIntent(str, Enum):
    BUY = "BUY"
    RENT = "RENT"
    SELL = "SELL"
    LEASE = "LEASE"
    INVEST = "INVEST"


class PropertyPurpose(str, Enum):
    RESIDENTIAL = "RESIDENTIAL"
    COMMERCIAL = "COMMERCIAL"
    LAND = "LAND"
    PARKING = "PARKING"
    OTHER = "OTHER"


class Timeline(str, Enum):
    IMMEDIATE = "IMMEDIATE"
    ONE_THREE_MONTHS = "ONE_THREE_MONTHS"
    THREE_SIX_MONTHS = "THREE_SIX_MONTHS"
    SIX_PLUS_MONTHS = "SIX_PLUS_MONTHS"


class FinancingType(str, Enum):
    CASH = "CASH"
    MORTGAGE = "MORTGAGE"
    PREAPPROVAL_PENDING = "PREAPPROVAL_PENDING"


class LeadSource(str, Enum):
    REFERRAL = "REFERRAL"
    WEB = "WEB"
    PORTAL = "PORTAL"
    WALK_IN = "WALK_IN"
    SOCIAL = "SOCIAL"
