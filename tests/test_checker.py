import logging

import pytest

from pogo_icons.checker import PrefixCollisionError, check_prefix_collisions, find_unmatched, report
from pogo_icons.identity import Identity
from pogo_icons.suffix_table import PendingEntry, SuffixTableBuilder


def make_table(**entries):
    builder = SuffixTableBuilder()
    for suffix, entry in entries.items():
        builder.put(suffix, entry)
    return builder.finish()


def test_collision_is_fatal(caplog):
    table = make_table(**{"025_00": PendingEntry(), "025_00_x": PendingEntry()})
    with caplog.at_level(logging.ERROR), pytest.raises(PrefixCollisionError):
        check_prefix_collisions(table)
    assert "Illegal combinations found 025_00_x 025_00" in caplog.text


def test_no_collision_passes():
    check_prefix_collisions(make_table(**{"025_00": PendingEntry(), "025_01": PendingEntry()}))


def test_female_placeholders_and_hits_are_not_reported():
    table = make_table(
        **{
            "025_00": PendingEntry([Identity(25)], female_variant_expected=False),
            "025_01": PendingEntry([Identity(25, 2)], female_variant_expected=True),
            "026_00": PendingEntry([Identity(26)], female_variant_expected=False),
        }
    )
    table.mark_matched("025_00")
    assert find_unmatched(table, []) == ["026_00"]
    assert find_unmatched(table, ["26"]) == []


def test_known_gap_is_informational(caplog):
    table = make_table(**{"493_11": PendingEntry([Identity(493, form=1787)], female_variant_expected=False)})
    with caplog.at_level(logging.WARNING):
        assert report(table, []) == []
    assert "no matching assets" not in caplog.text
    assert "Arceus normal form" not in caplog.text


def test_known_gap_resolution_is_announced(caplog):
    table = make_table(**{"493_11": PendingEntry([Identity(493, form=1787)], female_variant_expected=False)})
    table.mark_matched("493_11")
    with caplog.at_level(logging.WARNING):
        report(table, ["493-f1787"])
    assert "Asset for Arceus normal form (493_11) has been added" in caplog.text
