"""
Test suite for prefix systems, separators and TOML prefix loading.
"""

# Standard library -----------------------------------------------------------------------------------------------------
from dataclasses import FrozenInstanceError

# Third-party ----------------------------------------------------------------------------------------------------------
import pytest

# Local ----------------------------------------------------------------------------------------------------------------
from sizefmt.config import (
    BINARY_PREFIXES, SI_PREFIXES, FormatConf, PrefixSystem, Separator,
    get_prefix_system, get_separator, load_prefix_systems,
)


# Tests ----------------------------------------------------------------------------------------------------------------

class TestPrefixSystem:

    def test_builtin_si(self):
        assert SI_PREFIXES.multiplier == 1000
        assert SI_PREFIXES.labels == ("", "k", "M", "G", "T", "P", "E", "Z", "Y")
        assert SI_PREFIXES.max_tier == 8

    def test_builtin_binary(self):
        assert BINARY_PREFIXES.multiplier == 1024
        assert BINARY_PREFIXES.label(1) == "Ki"
        assert BINARY_PREFIXES.label(8) == "Yi"

    def test_list_labels_become_tuple(self):
        mm = PrefixSystem(["m", "", "k"], 1000, name="millimetre")
        assert mm.labels == ("m", "", "k")
        assert mm.max_tier == 2
        assert mm.label(0) == "m"

    def test_frozen(self):
        with pytest.raises(FrozenInstanceError):
            SI_PREFIXES.multiplier = 10

    @pytest.mark.parametrize(
        "labels, multiplier, error, match",
        [
            pytest.param([], 1000, ValueError, "at least one", id="empty"),
            pytest.param("kMG", 1000, TypeError, "sequence of str", id="str-labels"),
            pytest.param(["", 3], 1000, TypeError, "must be str", id="non-str-label"),
            pytest.param(["", "k"], 1, ValueError, ">= 2", id="multiplier-one"),
            pytest.param(["", "k"], 1000.0, TypeError, "must be int", id="float-multiplier"),
            pytest.param(["", "k"], True, TypeError, "must be int", id="bool-multiplier"),
        ],
    )
    def test_invalid(self, labels, multiplier, error, match):
        with pytest.raises(error, match=match):
            PrefixSystem(labels, multiplier)

    @pytest.mark.parametrize("tier", [-1, 9])
    def test_label_out_of_range(self, tier):
        with pytest.raises(IndexError, match="out of range"):
            SI_PREFIXES.label(tier)

    def test_from_mapping(self):
        system = PrefixSystem.from_mapping({"labels": ["", "k"], "multiplier": 1000}, name="short")
        assert system == PrefixSystem(("", "k"), 1000, name="short")

    def test_from_mapping_missing_keys(self):
        with pytest.raises(ValueError, match="missing keys: multiplier"):
            PrefixSystem.from_mapping({"labels": ["", "k"]}, name="short")

    def test_from_mapping_not_a_table(self):
        with pytest.raises(TypeError, match="must be a table"):
            PrefixSystem.from_mapping(["", "k"], name="short")

    def test_lookup(self):
        assert get_prefix_system("si") is SI_PREFIXES
        assert get_prefix_system("binary") is BINARY_PREFIXES
        with pytest.raises(ValueError, match="unknown prefix system"):
            get_prefix_system("imperial")

    def test_lookup_custom_wins(self):
        custom = PrefixSystem(["", "K"], 1000, name="si")
        assert get_prefix_system("si", {"si": custom}) is custom


class TestSeparator:

    def test_members(self):
        assert Separator.POINT == "."
        assert Separator.COMMA == ","

    @pytest.mark.parametrize(
        "value, expected",
        [
            pytest.param(Separator.POINT, ".", id="point"),
            pytest.param(Separator.COMMA, ",", id="comma"),
            pytest.param("'", "'", id="apostrophe"),
            pytest.param("·", "·", id="middle-dot"),
        ],
    )
    def test_valid(self, value, expected):
        result = get_separator(value)
        assert result == expected
        assert type(result) is str

    @pytest.mark.parametrize(
        "value, error",
        [
            pytest.param("", ValueError, id="empty"),
            pytest.param("..", ValueError, id="two-chars"),
            pytest.param(44, TypeError, id="int"),
        ],
    )
    def test_invalid(self, value, error):
        with pytest.raises(error):
            get_separator(value)


class TestFormatConf:

    def test_defaults(self):
        assert FormatConf.DEFAULT_PRECISION == 1
        assert FormatConf.DIGITS_PER_TIER == 3


class TestLoadPrefixSystems:

    def test_load(self, prefix_file):
        systems = load_prefix_systems(prefix_file())
        assert list(systems) == ["millimetre", "decimal"]
        assert systems["millimetre"] == PrefixSystem(("m", "", "k"), 1000, name="millimetre")
        assert systems["decimal"].multiplier == 10

    def test_no_prefixes_table(self, prefix_file):
        with pytest.raises(ValueError, match="no \\[prefixes"):
            load_prefix_systems(prefix_file("[other]\nkey = 1\n"))

    def test_malformed_system(self, prefix_file):
        path = prefix_file("[prefixes.broken]\nlabels = ['', 'k']\n")
        with pytest.raises(ValueError, match="'broken' is missing keys: multiplier"):
            load_prefix_systems(path)

    def test_invalid_multiplier(self, prefix_file):
        path = prefix_file("[prefixes.unit]\nlabels = ['']\nmultiplier = 1\n")
        with pytest.raises(ValueError, match=">= 2"):
            load_prefix_systems(path)

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_prefix_systems(tmp_path / "absent.toml")
