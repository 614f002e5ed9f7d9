"""Seed catalog of Mumbai regions with their baseline safety scores."""

from typing import List

from citysafety.models.region import CatalogRegion

SEED_CATALOG: List[CatalogRegion] = [
    CatalogRegion("Andheri West", 19.1136, 72.8697, 75),
    CatalogRegion("Andheri East", 19.1197, 72.8694, 72),
    CatalogRegion("Bandra West", 19.0596, 72.8295, 80),
    CatalogRegion("Bandra East", 19.0544, 72.8420, 68),
    CatalogRegion("Borivali West", 19.2403, 72.8565, 65),
    CatalogRegion("Borivali East", 19.2304, 72.8564, 62),
    CatalogRegion("Colaba", 18.9067, 72.8147, 85),
    CatalogRegion("Dadar West", 19.0178, 72.8478, 70),
    CatalogRegion("Dadar East", 19.0189, 72.8489, 66),
    CatalogRegion("Fort", 18.9330, 72.8350, 82),
    CatalogRegion("Goregaon West", 19.1663, 72.8526, 68),
    CatalogRegion("Goregaon East", 19.1549, 72.8639, 64),
    CatalogRegion("Juhu", 19.1075, 72.8263, 78),
    CatalogRegion("Kandivali West", 19.2074, 72.8320, 67),
    CatalogRegion("Kandivali East", 19.2039, 72.8550, 63),
    CatalogRegion("Kurla West", 19.0728, 72.8826, 58),
    CatalogRegion("Kurla East", 19.0653, 72.8935, 55),
    CatalogRegion("Malad West", 19.1864, 72.8411, 65),
    CatalogRegion("Malad East", 19.1858, 72.8489, 61),
    CatalogRegion("Marine Drive", 18.9432, 72.8236, 88),
    CatalogRegion("Mulund West", 19.1722, 72.9565, 72),
    CatalogRegion("Mulund East", 19.1607, 72.9560, 69),
    CatalogRegion("Powai", 19.1176, 72.9060, 76),
    CatalogRegion("Santa Cruz West", 19.0812, 72.8347, 70),
    CatalogRegion("Santa Cruz East", 19.0896, 72.8422, 67),
    CatalogRegion("Thane West", 19.2183, 72.9781, 68),
    CatalogRegion("Versova", 19.1311, 72.8158, 73),
    CatalogRegion("Vile Parle West", 19.1045, 72.8370, 74),
    CatalogRegion("Vile Parle East", 19.0990, 72.8489, 71),
    CatalogRegion("Worli", 19.0176, 72.8170, 79),
]
