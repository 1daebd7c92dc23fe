import logging

from pogo_icons.enums import Gender
from pogo_icons.identity import Identity


def test_plain_species():
    assert Identity(25, gender=0, form=0, evolution=0).filename(costume=0, shiny=False) == "25"


def test_costume_and_shiny():
    assert Identity(25).filename(costume=3, shiny=True) == "25-c3-shiny"


def test_form_and_gender():
    assert Identity(25, gender=1, form=5).filename() == "25-f5-g1"


def test_full_ordering():
    assert Identity(6, gender=Gender.FEMALE, evolution=2).filename(costume=4, shiny=True) == "6-e2-c4-g2-shiny"


def test_evolution_and_form_warns(caplog):
    with caplog.at_level(logging.WARNING):
        key = Identity(150, form=7, evolution=1).filename()
    assert key == "150-e1-f7"
    assert "both evolution and form" in caplog.text


def test_with_gender_keeps_the_rest():
    target = Identity(19, form=46)
    female = target.with_gender()
    assert female == Identity(19, Gender.FEMALE, 46, 0)
    assert target.gender == Gender.UNSET


def test_identity_is_hashable():
    assert len({Identity(1), Identity(1), Identity(1, form=2)}) == 2
