from __future__ import annotations

from typing import List

import pytest

from whiskey_browser.core.record import Whiskey


def make_reference_whiskeys() -> List[Whiskey]:
    """
    Five bottles covering every filter dimension:
    - two bourbons sharing a distillery
    - Redbreast has only an MSRP, no purchase price
    """
    return [
        Whiskey(
            id=1,
            name="Buffalo Trace",
            type="bourbon",
            distillery="Buffalo Trace Distillery",
            region="Kentucky",
            country="USA",
            age=8,
            abv=45,
            rating=8.5,
            purchase_price=30,
            limited_edition=False,
            chill_filtered=True,
            natural_color=True,
            is_opened=False,
        ),
        Whiskey(
            id=2,
            name="Pappy Van Winkle 20 Year",
            type="bourbon",
            distillery="Buffalo Trace Distillery",
            region="Kentucky",
            country="USA",
            age=20,
            abv=45.2,
            rating=9.8,
            purchase_price=2000,
            limited_edition=True,
            chill_filtered=False,
            natural_color=True,
            is_opened=False,
        ),
        Whiskey(
            id=3,
            name="Lagavulin 16",
            type="scotch",
            distillery="Lagavulin Distillery",
            region="Islay",
            country="Scotland",
            age=16,
            abv=43,
            rating=9.0,
            purchase_price=100,
            limited_edition=False,
            chill_filtered=True,
            natural_color=False,
            is_opened=True,
        ),
        Whiskey(
            id=4,
            name="Yamazaki 18",
            type="japanese",
            distillery="Yamazaki Distillery",
            region="Osaka",
            country="Japan",
            age=18,
            abv=43,
            rating=9.5,
            purchase_price=500,
            limited_edition=True,
            chill_filtered=True,
            natural_color=True,
            is_opened=False,
        ),
        Whiskey(
            id=5,
            name="Redbreast 12",
            type="irish",
            distillery="Midleton Distillery",
            region="Cork",
            country="Ireland",
            age=12,
            abv=40,
            rating=8.0,
            msrp=65,
            limited_edition=False,
            chill_filtered=False,
            natural_color=True,
            is_opened=True,
        ),
    ]


@pytest.fixture
def whiskeys() -> List[Whiskey]:
    return make_reference_whiskeys()
