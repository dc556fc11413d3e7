"""
Shared fixtures: the recorded DHL tracking page and a builder for pages
around hand written payloads.
"""

import json
from pathlib import Path

import pytest

FIXTURES = Path(__file__).parent / "fixtures"


def make_page(payload) -> str:
    """Wrap a payload the way the tracking page embeds its initial state."""
    literal = json.dumps(payload).replace('"', '\\"')
    return (
        "<html><body>\n"
        "<script>\n"
        "  window.__INITIAL_APP_STATE__ = {\n"
        '    initialState: JSON.parse("' + literal + '"),\n'
        '    config: {"currentDomain":"de","currentLanguage":"en","searchLimit":10}\n'
        "  };\n"
        "</script>\n"
        "</body></html>\n"
    )


@pytest.fixture
def tracking_page_path() -> Path:
    return FIXTURES / "tracking_page.html"


@pytest.fixture
def tracking_page(tracking_page_path) -> str:
    return tracking_page_path.read_text(encoding="utf-8")


@pytest.fixture
def found_payload() -> dict:
    return {
        "sendungen": [
            {
                "id": "00340434161094042557",
                "hasCompleteDetails": True,
                "sendungsdetails": {
                    "sendungsverlauf": {
                        "aktuellerStatus": "The shipment has been delivered",
                        "fortschritt": 5,
                        "events": [
                            {
                                "datum": "2021-03-01T08:12:00+01:00",
                                "status": "The shipment has been loaded onto the delivery vehicle",
                                "ruecksendung": False,
                                "ort": "Berlin",
                            },
                            {
                                "datum": "2021-03-01T13:40:00+01:00",
                                "status": "The shipment has been delivered",
                                "ruecksendung": False,
                            },
                        ],
                    },
                    "zielland": "Germany",
                    "istZugestellt": True,
                },
            }
        ]
    }


@pytest.fixture
def not_found_payload() -> dict:
    return {
        "sendungen": [
            {
                "id": "JJD000390007",
                "hasCompleteDetails": False,
                "sendungNichtGefunden": {
                    "keineDatenVerfuegbar": True,
                    "keineDhlPaketSendung": False,
                },
            }
        ]
    }


@pytest.fixture
def page_builder():
    return make_page
