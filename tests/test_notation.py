"""Tests for compass notation parsing."""

import pytest

from hksrcompass.models.compass import Compass, Ring, RingGroup
from hksrcompass.notation import NotationError, parse_notation


class TestParseNotation:
    """Tests for parse_notation."""

    def test_parse_canonical(self):
        compass = parse_notation("0-1,3+2,5+0/om")
        assert compass.outer_ring == Ring(location=0, speed=-1)
        assert compass.middle_ring == Ring(location=3, speed=2)
        assert compass.inner_ring == Ring(location=5, speed=0)
        assert compass.ring_groups == (RingGroup.OUTER_MIDDLE,)

    @pytest.mark.parametrize(
        "text",
        ["0-1,3+2,5+0/om", "1+1,2-5,0+0/i,m,mi,o,oi,om", "4+3,4+3,4+3/"],
    )
    def test_canonical_text_reproduced(self, text):
        assert str(parse_notation(text)) == text

    def test_keeps_written_order(self):
        compass = parse_notation("0+0,0+0,0+0/o,i,o")
        assert compass.ring_groups == (RingGroup.OUTER, RingGroup.INNER, RingGroup.OUTER)
        assert str(compass) == "0+0,0+0,0+0/i,o"

    def test_non_canonical_values_standardized(self):
        compass = parse_notation("7-7,13+8,6+0/oi")
        assert compass.outer_ring == Ring(location=7, speed=-7)
        assert str(compass) == "1-1,1+2,0+0/oi"

    def test_surrounding_whitespace(self):
        assert parse_notation("  0+1,0+0,0+0/m\n") == Compass(
            outer_ring=Ring(location=0, speed=1), ring_groups=[RingGroup.MIDDLE]
        )

    def test_no_groups(self):
        assert parse_notation("0+0,0+0,0+0/").ring_groups == ()


class TestNotationErrors:
    """Tests for malformed notation."""

    def test_missing_slash(self):
        with pytest.raises(NotationError, match="Missing '/'"):
            parse_notation("0-1,3+2,5+0")

    def test_wrong_ring_count(self):
        with pytest.raises(NotationError, match="Expected 3 ring fields"):
            parse_notation("0-1,3+2/om")

    @pytest.mark.parametrize("ring", ["01", "-1+1", "a+1", "1+", "1++1", "٣+2", "1+٣"])
    def test_bad_ring(self, ring):
        with pytest.raises(NotationError, match="outer ring"):
            parse_notation(f"{ring},0+0,0+0/o")

    def test_unknown_code(self):
        with pytest.raises(NotationError, match="Unknown ring group code"):
            parse_notation("0+0,0+0,0+0/om,x")

    def test_empty_code(self):
        with pytest.raises(NotationError, match="Empty ring group code at position 2"):
            parse_notation("0+0,0+0,0+0/i,,o")

    def test_is_value_error(self):
        with pytest.raises(ValueError):
            parse_notation("")
