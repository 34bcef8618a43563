"""Tests for Outcome records and the Unit sentinel."""

import copy
import dataclasses
import pickle

import pytest

from straitjacket import Outcome, Unit, UnitType, is_unit


@dataclasses.dataclass(frozen=True)
class Sum(Outcome):
    sum: int


@dataclasses.dataclass(frozen=True)
class Total(Outcome):
    sum: int


class TestUnitIdentity:
    def test_constructor_returns_singleton(self):
        assert UnitType() is Unit
        assert UnitType() is UnitType()

    def test_equality(self):
        assert Unit == UnitType()
        assert hash(Unit) == hash(UnitType())

    def test_not_equal_to_empty_values(self):
        assert Unit != None  # noqa: E711
        assert Unit != ()
        assert Unit != {}
        assert Unit != []
        assert Unit != Sum(sum=0)

    def test_copy_and_pickle_preserve_identity(self):
        assert copy.copy(Unit) is Unit
        assert copy.deepcopy(Unit) is Unit
        assert pickle.loads(pickle.dumps(Unit)) is Unit

    def test_cannot_subclass(self):
        with pytest.raises(TypeError):
            class MoreUnit(UnitType):
                pass

    def test_immutable(self):
        with pytest.raises(dataclasses.FrozenInstanceError):
            Unit.x = 1

    def test_repr(self):
        assert repr(Unit) == "Unit"
        assert str(Unit) == "Unit"

    def test_is_unit(self):
        assert is_unit(Unit) is True
        assert is_unit(None) is False
        assert is_unit(Sum(sum=1)) is False


class TestUnitIsEmpty:
    def test_length(self):
        assert len(Unit) == 0
        assert not Unit

    def test_iteration(self):
        assert list(Unit) == []
        assert [x for x in Unit] == []

    def test_membership(self):
        assert "sum" not in Unit
        assert None not in Unit

    def test_keyed_access_is_absent(self):
        with pytest.raises(KeyError):
            Unit["sum"]
        with pytest.raises(KeyError):
            Unit[0]
        assert Unit.get("sum") is None
        assert Unit.get("sum", 42) == 42

    def test_record_views(self):
        assert Unit.keys() == []
        assert Unit.values() == []
        assert Unit.items() == []
        assert Unit.members() == []
        assert Unit.values_at("a", "b") == []
        assert Unit.select(lambda v: True) == []

    def test_conversions(self):
        assert Unit.to_list() == []
        assert Unit.to_dict() == {}
        assert dict(Unit.items()) == {}

    def test_dataclass_introspection(self):
        assert dataclasses.is_dataclass(Unit)
        assert dataclasses.fields(Unit) == ()
        assert dataclasses.asdict(Unit) == {}


class TestOutcome:
    def test_fields(self):
        outcome = Sum(sum=3)
        assert outcome.sum == 3
        assert outcome.to_dict() == {"sum": 3}

    def test_immutable(self):
        outcome = Sum(sum=3)
        with pytest.raises(dataclasses.FrozenInstanceError):
            outcome.sum = 4

    def test_equality_is_per_type(self):
        assert Sum(sum=3) == Sum(sum=3)
        assert Sum(sum=3) != Total(sum=3)

    def test_unit_is_not_an_outcome(self):
        assert not isinstance(Unit, Outcome)
