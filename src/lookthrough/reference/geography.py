"""Country -> region and country -> market classification.

Market classes follow the MSCI market classification; countries MSCI does not
cover are listed as Frontier. Country names are the ones fund factsheets use,
with a few common aliases.
"""
from __future__ import annotations

from typing import Dict, List, Tuple

DEVELOPED = "Developed"
EMERGING = "Emerging"
FRONTIER = "Frontier"

# region -> [(country, market)]
_COUNTRIES_BY_REGION: Dict[str, List[Tuple[str, str]]] = {
    "North America": [
        ("United States", DEVELOPED),
        ("USA", DEVELOPED),
        ("Canada", DEVELOPED),
        ("Bermuda", DEVELOPED),
    ],
    "Latin America": [
        ("Mexico", EMERGING),
        ("Brazil", EMERGING),
        ("Chile", EMERGING),
        ("Colombia", EMERGING),
        ("Peru", EMERGING),
        ("Argentina", FRONTIER),
        ("Uruguay", FRONTIER),
        ("Panama", FRONTIER),
        ("Costa Rica", FRONTIER),
        ("Jamaica", FRONTIER),
        ("Trinidad and Tobago", FRONTIER),
        ("Cayman Islands", DEVELOPED),
        ("Puerto Rico", DEVELOPED),
    ],
    "Europe": [
        ("United Kingdom", DEVELOPED),
        ("UK", DEVELOPED),
        ("Ireland", DEVELOPED),
        ("France", DEVELOPED),
        ("Germany", DEVELOPED),
        ("Netherlands", DEVELOPED),
        ("Belgium", DEVELOPED),
        ("Luxembourg", DEVELOPED),
        ("Switzerland", DEVELOPED),
        ("Austria", DEVELOPED),
        ("Italy", DEVELOPED),
        ("Spain", DEVELOPED),
        ("Portugal", DEVELOPED),
        ("Denmark", DEVELOPED),
        ("Sweden", DEVELOPED),
        ("Norway", DEVELOPED),
        ("Finland", DEVELOPED),
        ("Iceland", FRONTIER),
        ("Jersey", DEVELOPED),
        ("Guernsey", DEVELOPED),
        ("Isle of Man", DEVELOPED),
        ("Monaco", DEVELOPED),
        ("Liechtenstein", DEVELOPED),
        ("Malta", DEVELOPED),
        ("Cyprus", DEVELOPED),
        ("Greece", EMERGING),
        ("Poland", EMERGING),
        ("Czech Republic", EMERGING),
        ("Czechia", EMERGING),
        ("Hungary", EMERGING),
        ("Turkey", EMERGING),
        ("Russia", EMERGING),
        ("Romania", FRONTIER),
        ("Slovenia", FRONTIER),
        ("Croatia", FRONTIER),
        ("Serbia", FRONTIER),
        ("Estonia", FRONTIER),
        ("Latvia", FRONTIER),
        ("Lithuania", FRONTIER),
        ("Bulgaria", FRONTIER),
        ("Slovakia", FRONTIER),
        ("Ukraine", FRONTIER),
        ("Kazakhstan", FRONTIER),
    ],
    "Middle East": [
        ("Israel", DEVELOPED),
        ("Saudi Arabia", EMERGING),
        ("United Arab Emirates", EMERGING),
        ("Qatar", EMERGING),
        ("Kuwait", EMERGING),
        ("Bahrain", FRONTIER),
        ("Oman", FRONTIER),
        ("Jordan", FRONTIER),
        ("Lebanon", FRONTIER),
    ],
    "Africa": [
        ("South Africa", EMERGING),
        ("Egypt", EMERGING),
        ("Morocco", FRONTIER),
        ("Nigeria", FRONTIER),
        ("Kenya", FRONTIER),
        ("Mauritius", FRONTIER),
        ("Tunisia", FRONTIER),
        ("Ghana", FRONTIER),
        ("Botswana", FRONTIER),
        ("Zimbabwe", FRONTIER),
        ("West African Economic and Monetary Union", FRONTIER),
    ],
    "Asia": [
        ("Japan", DEVELOPED),
        ("Hong Kong", DEVELOPED),
        ("Singapore", DEVELOPED),
        ("China", EMERGING),
        ("Taiwan", EMERGING),
        ("South Korea", EMERGING),
        ("Korea", EMERGING),
        ("India", EMERGING),
        ("Indonesia", EMERGING),
        ("Malaysia", EMERGING),
        ("Philippines", EMERGING),
        ("Thailand", EMERGING),
        ("Macau", EMERGING),
        ("Pakistan", FRONTIER),
        ("Bangladesh", FRONTIER),
        ("Sri Lanka", FRONTIER),
        ("Vietnam", FRONTIER),
    ],
    "Oceania": [
        ("Australia", DEVELOPED),
        ("New Zealand", DEVELOPED),
        ("Papua New Guinea", FRONTIER),
    ],
}

COUNTRY_TO_REGION: Dict[str, str] = {
    country: region
    for region, countries in _COUNTRIES_BY_REGION.items()
    for country, _ in countries
}

COUNTRY_TO_MARKET: Dict[str, str] = {
    country: market
    for countries in _COUNTRIES_BY_REGION.values()
    for country, market in countries
}
