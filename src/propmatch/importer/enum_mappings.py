"""
Tablas de alias para enums del importador.

Mapean variantes comunes, sinónimos en inglés y traducciones al
griego (todas en minúsculas) al token canónico del esquema.
"""

from collections.abc import Mapping
from types import MappingProxyType

EnumMapping = Mapping[str, str]


PROPERTY_TYPE_MAP: EnumMapping = MappingProxyType({
    # Inglés
    "residential": "RESIDENTIAL",
    "commercial": "COMMERCIAL",
    "land": "LAND",
    "rental": "RENTAL",
    "vacation": "VACATION",
    "apartment": "APARTMENT",
    "flat": "APARTMENT",
    "house": "HOUSE",
    "home": "HOUSE",
    "villa": "HOUSE",
    "maisonette": "MAISONETTE",
    "townhouse": "MAISONETTE",
    "warehouse": "WAREHOUSE",
    "storage": "WAREHOUSE",
    "parking": "PARKING",
    "garage": "PARKING",
    "plot": "PLOT",
    "farm": "FARM",
    "industrial": "INDUSTRIAL",
    "factory": "INDUSTRIAL",
    "other": "OTHER",
    # Griego
    "κατοικία": "RESIDENTIAL",
    "επαγγελματικό": "COMMERCIAL",
    "επαγγελματικός χώρος": "COMMERCIAL",
    "γη": "LAND",
    "οικόπεδο": "PLOT",
    "ενοικίαση": "RENTAL",
    "διακοπές": "VACATION",
    "διαμέρισμα": "APARTMENT",
    "σπίτι": "HOUSE",
    "μονοκατοικία": "HOUSE",
    "μεζονέτα": "MAISONETTE",
    "αποθήκη": "WAREHOUSE",
    "πάρκινγκ": "PARKING",
    "χώρος στάθμευσης": "PARKING",
    "αγρόκτημα": "FARM",
    "βιομηχανικό": "INDUSTRIAL",
    "βιομηχανικός χώρος": "INDUSTRIAL",
    "άλλο": "OTHER",
})

PROPERTY_STATUS_MAP: EnumMapping = MappingProxyType({
    "active": "ACTIVE",
    "available": "ACTIVE",
    "pending": "PENDING",
    "under contract": "PENDING",
    "sold": "SOLD",
    "off market": "OFF_MARKET",
    "off_market": "OFF_MARKET",
    "offmarket": "OFF_MARKET",
    "withdrawn": "WITHDRAWN",
    "cancelled": "WITHDRAWN",
    # Griego
    "ενεργό": "ACTIVE",
    "διαθέσιμο": "ACTIVE",
    "σε εκκρεμότητα": "PENDING",
    "πουλήθηκε": "SOLD",
    "εκτός αγοράς": "OFF_MARKET",
    "αποσύρθηκε": "WITHDRAWN",
})

TRANSACTION_TYPE_MAP: EnumMapping = MappingProxyType({
    "sale": "SALE",
    "sell": "SALE",
    "for sale": "SALE",
    "rental": "RENTAL",
    "rent": "RENTAL",
    "for rent": "RENTAL",
    "lease": "RENTAL",
    "short term": "SHORT_TERM",
    "short_term": "SHORT_TERM",
    "shortterm": "SHORT_TERM",
    "airbnb": "SHORT_TERM",
    "exchange": "EXCHANGE",
    "swap": "EXCHANGE",
    # Griego
    "πώληση": "SALE",
    "προς πώληση": "SALE",
    "ενοικίαση": "RENTAL",
    "προς ενοικίαση": "RENTAL",
    "μίσθωση": "RENTAL",
    "βραχυπρόθεσμη": "SHORT_TERM",
    "βραχυχρόνια": "SHORT_TERM",
    "ανταλλαγή": "EXCHANGE",
})

HEATING_TYPE_MAP: EnumMapping = MappingProxyType({
    "autonomous": "AUTONOMOUS",
    "individual": "AUTONOMOUS",
    "independent": "AUTONOMOUS",
    "central": "CENTRAL",
    "central heating": "CENTRAL",
    "natural gas": "NATURAL_GAS",
    "natural_gas": "NATURAL_GAS",
    "gas": "NATURAL_GAS",
    "heat pump": "HEAT_PUMP",
    "heat_pump": "HEAT_PUMP",
    "heatpump": "HEAT_PUMP",
    "electric": "ELECTRIC",
    "electrical": "ELECTRIC",
    "none": "NONE",
    "no heating": "NONE",
    "no": "NONE",
    # Griego
    "αυτόνομη": "AUTONOMOUS",
    "αυτόνομο": "AUTONOMOUS",
    "αυτόνομη θέρμανση": "AUTONOMOUS",
    "κεντρική": "CENTRAL",
    "κεντρικό": "CENTRAL",
    "κεντρική θέρμανση": "CENTRAL",
    "φυσικό αέριο": "NATURAL_GAS",
    "αέριο": "NATURAL_GAS",
    "αντλία θερμότητας": "HEAT_PUMP",
    "ηλεκτρική": "ELECTRIC",
    "ηλεκτρικό": "ELECTRIC",
    "χωρίς": "NONE",
    "καμία": "NONE",
    "δεν υπάρχει": "NONE",
})

# Las letras griegas (α, β, γ...) siguen el orden del certificado griego
ENERGY_CERT_CLASS_MAP: EnumMapping = MappingProxyType({
    "a+": "A_PLUS",
    "a plus": "A_PLUS",
    "a_plus": "A_PLUS",
    "aplus": "A_PLUS",
    "α+": "A_PLUS",
    "a": "A",
    "α": "A",
    "b": "B",
    "β": "B",
    "c": "C",
    "γ": "C",
    "d": "D",
    "δ": "D",
    "e": "E",
    "ε": "E",
    "f": "F",
    "ζ": "F",
    "g": "G",
    "η": "G",
    "h": "H",
    "θ": "H",
    "in progress": "IN_PROGRESS",
    "in_progress": "IN_PROGRESS",
    "pending": "IN_PROGRESS",
    # Griego
    "σε εξέλιξη": "IN_PROGRESS",
    "εκκρεμεί": "IN_PROGRESS",
})

PROPERTY_CONDITION_MAP: EnumMapping = MappingProxyType({
    "excellent": "EXCELLENT",
    "perfect": "EXCELLENT",
    "like new": "EXCELLENT",
    "very good": "VERY_GOOD",
    "very_good": "VERY_GOOD",
    "verygood": "VERY_GOOD",
    "great": "VERY_GOOD",
    "good": "GOOD",
    "fair": "GOOD",
    "average": "GOOD",
    "needs renovation": "NEEDS_RENOVATION",
    "needs_renovation": "NEEDS_RENOVATION",
    "needsrenovation": "NEEDS_RENOVATION",
    "renovation needed": "NEEDS_RENOVATION",
    "to renovate": "NEEDS_RENOVATION",
    "fixer upper": "NEEDS_RENOVATION",
    # Griego
    "άριστη": "EXCELLENT",
    "άριστο": "EXCELLENT",
    "εξαιρετική": "EXCELLENT",
    "πολύ καλή": "VERY_GOOD",
    "πολύ καλό": "VERY_GOOD",
    "καλή": "GOOD",
    "καλό": "GOOD",
    "χρειάζεται ανακαίνιση": "NEEDS_RENOVATION",
    "προς ανακαίνιση": "NEEDS_RENOVATION",
    "ανακαίνιση": "NEEDS_RENOVATION",
})

FURNISHED_STATUS_MAP: EnumMapping = MappingProxyType({
    "no": "NO",
    "unfurnished": "NO",
    "not furnished": "NO",
    "none": "NO",
    "false": "NO",
    "0": "NO",
    "partially": "PARTIALLY",
    "partial": "PARTIALLY",
    "semi-furnished": "PARTIALLY",
    "semi furnished": "PARTIALLY",
    "some": "PARTIALLY",
    "fully": "FULLY",
    "full": "FULLY",
    "furnished": "FULLY",
    "yes": "FULLY",
    "true": "FULLY",
    "1": "FULLY",
    # Griego
    "όχι": "NO",
    "χωρίς έπιπλα": "NO",
    "αεπίπλωτο": "NO",
    "μερικώς": "PARTIALLY",
    "μερικά": "PARTIALLY",
    "ημιεπιπλωμένο": "PARTIALLY",
    "πλήρως": "FULLY",
    "επιπλωμένο": "FULLY",
    "ναι": "FULLY",
    "πλήρες": "FULLY",
})

PRICE_TYPE_MAP: EnumMapping = MappingProxyType({
    "rental": "RENTAL",
    "rent": "RENTAL",
    "monthly": "RENTAL",
    "sale": "SALE",
    "sell": "SALE",
    "purchase": "SALE",
    "per acre": "PER_ACRE",
    "per_acre": "PER_ACRE",
    "peracre": "PER_ACRE",
    "per sqm": "PER_SQM",
    "per_sqm": "PER_SQM",
    "persqm": "PER_SQM",
    "per square meter": "PER_SQM",
    "per m2": "PER_SQM",
    # Griego
    "ενοικίαση": "RENTAL",
    "μηνιαίο": "RENTAL",
    "πώληση": "SALE",
    "ανά στρέμμα": "PER_ACRE",
    "ανά τ.μ.": "PER_SQM",
    "ανά τετραγωνικό": "PER_SQM",
})

PORTAL_VISIBILITY_MAP: EnumMapping = MappingProxyType({
    "private": "PRIVATE",
    "hidden": "PRIVATE",
    "internal": "PRIVATE",
    "selected": "SELECTED",
    "limited": "SELECTED",
    "some": "SELECTED",
    "public": "PUBLIC",
    "visible": "PUBLIC",
    "all": "PUBLIC",
    # Griego
    "ιδιωτικό": "PRIVATE",
    "κρυφό": "PRIVATE",
    "επιλεγμένο": "SELECTED",
    "δημόσιο": "PUBLIC",
    "ορατό": "PUBLIC",
})

ADDRESS_PRIVACY_LEVEL_MAP: EnumMapping = MappingProxyType({
    "exact": "EXACT",
    "full": "EXACT",
    "complete": "EXACT",
    "partial": "PARTIAL",
    "approximate": "PARTIAL",
    "area only": "PARTIAL",
    "hidden": "HIDDEN",
    "none": "HIDDEN",
    "private": "HIDDEN",
    # Griego
    "ακριβής": "EXACT",
    "πλήρης": "EXACT",
    "μερική": "PARTIAL",
    "κατά προσέγγιση": "PARTIAL",
    "κρυφή": "HIDDEN",
    "απόκρυψη": "HIDDEN",
})

LEGALIZATION_STATUS_MAP: EnumMapping = MappingProxyType({
    "legalized": "LEGALIZED",
    "legal": "LEGALIZED",
    "compliant": "LEGALIZED",
    "in progress": "IN_PROGRESS",
    "in_progress": "IN_PROGRESS",
    "pending": "IN_PROGRESS",
    "processing": "IN_PROGRESS",
    "undeclared": "UNDECLARED",
    "not declared": "UNDECLARED",
    "illegal": "UNDECLARED",
    # Griego
    "τακτοποιημένο": "LEGALIZED",
    "νόμιμο": "LEGALIZED",
    "σε εξέλιξη": "IN_PROGRESS",
    "σε διαδικασία": "IN_PROGRESS",
    "αδήλωτο": "UNDECLARED",
    "μη δηλωμένο": "UNDECLARED",
})

CLIENT_TYPE_MAP: EnumMapping = MappingProxyType({
    "buyer": "BUYER",
    "purchaser": "BUYER",
    "seller": "SELLER",
    "vendor": "SELLER",
    "owner": "SELLER",
    "renter": "RENTER",
    "tenant": "RENTER",
    "lessee": "RENTER",
    "investor": "INVESTOR",
    "referral partner": "REFERRAL_PARTNER",
    "referral_partner": "REFERRAL_PARTNER",
    "partner": "REFERRAL_PARTNER",
    "agent": "REFERRAL_PARTNER",
    # Griego
    "αγοραστής": "BUYER",
    "πωλητής": "SELLER",
    "ιδιοκτήτης": "SELLER",
    "ενοικιαστής": "RENTER",
    "μισθωτής": "RENTER",
    "επενδυτής": "INVESTOR",
    "συνεργάτης": "REFERRAL_PARTNER",
})

CLIENT_STATUS_MAP: EnumMapping = MappingProxyType({
    "lead": "LEAD",
    "prospect": "LEAD",
    "new": "LEAD",
    "active": "ACTIVE",
    "current": "ACTIVE",
    "inactive": "INACTIVE",
    "dormant": "INACTIVE",
    "converted": "CONVERTED",
    "closed": "CONVERTED",
    "won": "CONVERTED",
    "lost": "LOST",
    "dead": "LOST",
    # Griego
    "νέος": "LEAD",
    "ενεργός": "ACTIVE",
    "ανενεργός": "INACTIVE",
    "μετατράπηκε": "CONVERTED",
    "ολοκληρώθηκε": "CONVERTED",
    "χαμένος": "LOST",
})

PERSON_TYPE_MAP: EnumMapping = MappingProxyType({
    "individual": "INDIVIDUAL",
    "person": "INDIVIDUAL",
    "private": "INDIVIDUAL",
    "company": "COMPANY",
    "business": "COMPANY",
    "corporate": "COMPANY",
    "organization": "COMPANY",
    "investor": "INVESTOR",
    "broker": "BROKER",
    "agent": "BROKER",
    # Griego
    "ιδιώτης": "INDIVIDUAL",
    "φυσικό πρόσωπο": "INDIVIDUAL",
    "εταιρεία": "COMPANY",
    "επιχείρηση": "COMPANY",
    "νομικό πρόσωπο": "COMPANY",
    "επενδυτής": "INVESTOR",
    "μεσίτης": "BROKER",
})

CLIENT_INTENT_MAP: EnumMapping = MappingProxyType({
    "buy": "BUY",
    "purchase": "BUY",
    "buying": "BUY",
    "rent": "RENT",
    "renting": "RENT",
    "lease": "LEASE",
    "leasing": "LEASE",
    "sell": "SELL",
    "selling": "SELL",
    "invest": "INVEST",
    "investment": "INVEST",
    "investing": "INVEST",
    # Griego
    "αγορά": "BUY",
    "ενοικίαση": "RENT",
    "μίσθωση": "LEASE",
    "πώληση": "SELL",
    "επένδυση": "INVEST",
})

PROPERTY_PURPOSE_MAP: EnumMapping = MappingProxyType({
    "residential": "RESIDENTIAL",
    "home": "RESIDENTIAL",
    "living": "RESIDENTIAL",
    "commercial": "COMMERCIAL",
    "business": "COMMERCIAL",
    "office": "COMMERCIAL",
    "land": "LAND",
    "plot": "LAND",
    "parking": "PARKING",
    "garage": "PARKING",
    "other": "OTHER",
    # Griego
    "κατοικία": "RESIDENTIAL",
    "επαγγελματικό": "COMMERCIAL",
    "γη": "LAND",
    "οικόπεδο": "LAND",
    "πάρκινγκ": "PARKING",
    "άλλο": "OTHER",
})

TIMELINE_MAP: EnumMapping = MappingProxyType({
    "immediate": "IMMEDIATE",
    "now": "IMMEDIATE",
    "asap": "IMMEDIATE",
    "urgent": "IMMEDIATE",
    "1-3 months": "ONE_THREE_MONTHS",
    "one_three_months": "ONE_THREE_MONTHS",
    "1-3": "ONE_THREE_MONTHS",
    "3-6 months": "THREE_SIX_MONTHS",
    "three_six_months": "THREE_SIX_MONTHS",
    "3-6": "THREE_SIX_MONTHS",
    "6+ months": "SIX_PLUS_MONTHS",
    "six_plus_months": "SIX_PLUS_MONTHS",
    "6+": "SIX_PLUS_MONTHS",
    "later": "SIX_PLUS_MONTHS",
    # Griego
    "άμεσα": "IMMEDIATE",
    "τώρα": "IMMEDIATE",
    "1-3 μήνες": "ONE_THREE_MONTHS",
    "3-6 μήνες": "THREE_SIX_MONTHS",
    "6+ μήνες": "SIX_PLUS_MONTHS",
    "αργότερα": "SIX_PLUS_MONTHS",
})

FINANCING_TYPE_MAP: EnumMapping = MappingProxyType({
    "cash": "CASH",
    "all cash": "CASH",
    "mortgage": "MORTGAGE",
    "loan": "MORTGAGE",
    "bank loan": "MORTGAGE",
    "financing": "MORTGAGE",
    "preapproval pending": "PREAPPROVAL_PENDING",
    "preapproval_pending": "PREAPPROVAL_PENDING",
    "pending": "PREAPPROVAL_PENDING",
    "pre-approval": "PREAPPROVAL_PENDING",
    # Griego
    "μετρητά": "CASH",
    "στεγαστικό": "MORTGAGE",
    "δάνειο": "MORTGAGE",
    "στεγαστικό δάνειο": "MORTGAGE",
    "εκκρεμεί προέγκριση": "PREAPPROVAL_PENDING",
})

LEAD_SOURCE_MAP: EnumMapping = MappingProxyType({
    "referral": "REFERRAL",
    "referred": "REFERRAL",
    "word of mouth": "REFERRAL",
    "web": "WEB",
    "website": "WEB",
    "online": "WEB",
    "internet": "WEB",
    "portal": "PORTAL",
    "listing site": "PORTAL",
    "walk in": "WALK_IN",
    "walk_in": "WALK_IN",
    "walkin": "WALK_IN",
    "office": "WALK_IN",
    "social": "SOCIAL",
    "social media": "SOCIAL",
    "facebook": "SOCIAL",
    "instagram": "SOCIAL",
    # Griego
    "σύσταση": "REFERRAL",
    "ιστοσελίδα": "WEB",
    "διαδίκτυο": "WEB",
    "πύλη": "PORTAL",
    "επίσκεψη": "WALK_IN",
    "γραφείο": "WALK_IN",
    "κοινωνικά δίκτυα": "SOCIAL",
    "κοινωνικά μέσα": "SOCIAL",
})


# Campo del row -> tabla
PROPERTY_ENUM_MAPPINGS: Mapping[str, EnumMapping] = MappingProxyType({
    "property_type": PROPERTY_TYPE_MAP,
    "property_status": PROPERTY_STATUS_MAP,
    "transaction_type": TRANSACTION_TYPE_MAP,
    "heating_type": HEATING_TYPE_MAP,
    "energy_cert_class": ENERGY_CERT_CLASS_MAP,
    "condition": PROPERTY_CONDITION_MAP,
    "furnished": FURNISHED_STATUS_MAP,
    "price_type": PRICE_TYPE_MAP,
    "portal_visibility": PORTAL_VISIBILITY_MAP,
    "address_privacy_level": ADDRESS_PRIVACY_LEVEL_MAP,
    "legalization_status": LEGALIZATION_STATUS_MAP,
})

CLIENT_ENUM_MAPPINGS: Mapping[str, EnumMapping] = MappingProxyType({
    "client_type": CLIENT_TYPE_MAP,
    "client_status": CLIENT_STATUS_MAP,
    "person_type": PERSON_TYPE_MAP,
    "intent": CLIENT_INTENT_MAP,
    "purpose": PROPERTY_PURPOSE_MAP,
    "timeline": TIMELINE_MAP,
    "financing_type": FINANCING_TYPE_MAP,
    "lead_source": LEAD_SOURCE_MAP,
})
