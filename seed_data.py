# seed_data.py
from __future__ import annotations
from typing import List
from models import Wine

EXAMPLE_WINES = [
    {
        "id":"stags-leap-artemis",
        "name":"Stag's Leap Artemis",
        "grape":"Cabernet Sauvignon",
        "style":"Full-bodied red",
        "region":"Napa Valley, CA",
        "price":65,
        "vintage":2020,
        "tannin":8, "oak":7, "spice":4, "funk":2, "body":9, "acidity":6,
    },
    {
        "id":"duckhorn-merlot",
        "name":"Duckhorn Merlot",
        "grape":"Merlot",
        "style":"Medium to full-bodied red",
        "region":"Napa Valley, CA",
        "price":55,
        "vintage":2021,
        "tannin":6, "oak":6, "spice":3, "funk":2, "body":7, "acidity":5,
    },
    {
        "id":"ridge-geyserville",
        "name":"Ridge Geyserville",
        "grape":"Zinfandel Blend",
        "style":"Bold red blend",
        "region":"Sonoma, CA",
        "price":48,
        "vintage":2021,
        "tannin":7, "oak":5, "spice":8, "funk":3, "body":8, "acidity":6,
    },
    {
        "id":"antica-terra-willamette",
        "name":"Antica Terra Willamette",
        "grape":"Pinot Noir",
        "style":"Medium-bodied red",
        "region":"Willamette Valley, OR",
        "price":75,
        "vintage":2020,
        "tannin":5, "oak":4, "spice":5, "funk":6, "body":6, "acidity":7,
    },
    {
        "id":"caymus-cabernet",
        "name":"Caymus Cabernet",
        "grape":"Cabernet Sauvignon",
        "style":"Full-bodied red",
        "region":"Napa Valley, CA",
        "price":95,
        "vintage":2021,
        "tannin":9, "oak":8, "spice":3, "funk":1, "body":10, "acidity":5,
    },
    {
        "id":"beaucastel-chateauneuf",
        "name":"Beaucastel Châteauneuf",
        "grape":"Grenache Blend",
        "style":"Full-bodied red",
        "region":"Rhône, France",
        "price":85,
        "vintage":2019,
        "tannin":7, "oak":3, "spice":7, "funk":7, "body":8, "acidity":6,
    },
]

def load_catalog() -> List[Wine]:
    # altijd verse lijst; de aanroeper bezit de catalogus
    return [Wine(**w) for w in EXAMPLE_WINES]
