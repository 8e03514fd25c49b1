# tests/conftest.py
import json

import pytest
import structlog

from genere.generator import Generator


@pytest.fixture(autouse=True)
def reset_structlog():
    """Undo any structlog configuration a test performed."""
    yield
    structlog.reset_defaults()


@pytest.fixture
def generator():
    """An empty Generator."""
    return Generator()


@pytest.fixture
def hero_table():
    """The gendered French adventure table used in the documentation."""
    return {
        "hero": ["John[m]", "Olivia[f]", "Gail[n]", "Tom[m]", "Judi[f]"],
        "job[hero]": ["sorci·er·ère", "guerri·er·ère", "voleu·r·se", "barbare", "archer/archère"],
        "arme": ["hache[f]", "épée[f]", "gourdin[m]", "arc[m]", "masse[f]"],
        "adjectif[arme]": ["tranchant·e", "imposant·e", "étincelant·e", "rouillé·e", "brutal·e"],
        "description": ["{hero}, un·e[hero] {job} avec un·e[arme] {arme} {adjectif}"],
        "main[hero]": [
            "Il/Elle/Iel s'appelle {hero}. {hero} est un·e {job}. Il/Elle/Iel a un·e[arme] {arme}. "
            "Ce·tte[arme] {arme} est {adjectif}. Avec lui/elle se trouve {{description}} et "
            "{{description}}. {hero} les aime bien, c'est son crew."
        ],
    }


@pytest.fixture
def wizard_table():
    """Smallest table showing gender agreement."""
    return {
        "hero": ["John[m]", "Joan[f]"],
        "job[hero]": ["wizard/witch"],
        "main[hero]": ["{hero}. He/She is a {job}."],
    }


@pytest.fixture
def wizard_json(wizard_table):
    return json.dumps(wizard_table)


@pytest.fixture
def table_file(tmp_path, hero_table):
    """The hero table written to a UTF-8 JSON file."""
    path = tmp_path / "table.json"
    path.write_text(json.dumps(hero_table, ensure_ascii=False), encoding="utf-8")
    return path
