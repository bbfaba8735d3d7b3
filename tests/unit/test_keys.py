"""Unit tests for primary-key condition building and identifier binding."""

from dataclasses import dataclass
from typing import NamedTuple

import pytest

from tablerepo.keys import (
    KeyBinding,
    declared_fields,
    equals_row,
    primary_key_attributes,
    primary_key_condition,
)
from tablerepo.models.athlete import AthleteModel
from tablerepo.models.club_membership import ClubMembershipModel, MembershipId
from tablerepo.models.result_log import ResultLogModel


class ReversedId(NamedTuple):
    athlete_id: int
    club_id: int


class PlainId:
    def __init__(self, club_id, athlete_id):
        self.club_id = club_id
        self.athlete_id = athlete_id


class TestPrimaryKeyAttributes:
    def test_single_column_key(self):
        assert [a.key for a in primary_key_attributes(AthleteModel)] == ["id"]

    def test_composite_key_in_declaration_order(self):
        key = primary_key_attributes(ClubMembershipModel)
        assert [a.key for a in key] == ["club_id", "athlete_id"]

    def test_table_without_primary_key(self):
        """Mapper-level keys do not count as a table primary key."""
        assert primary_key_attributes(ResultLogModel) == []


class TestDeclaredFields:
    def test_dataclass(self):
        assert declared_fields(MembershipId) == ("club_id", "athlete_id")

    def test_named_tuple(self):
        assert declared_fields(ReversedId) == ("athlete_id", "club_id")

    def test_undeclared(self):
        assert declared_fields(PlainId) is None


class TestKeyBinding:
    def setup_method(self):
        self.binding = KeyBinding(["club_id", "athlete_id"])

    def test_dataclass_by_name(self):
        assert self.binding.values(MembershipId(club_id=1, athlete_id=2)) == (1, 2)

    def test_named_tuple_bound_by_name_not_position(self):
        assert self.binding.values(ReversedId(athlete_id=2, club_id=1)) == (1, 2)

    def test_plain_object_by_attribute(self):
        assert self.binding.values(PlainId(3, 4)) == (3, 4)

    def test_mapping_by_key(self):
        assert self.binding.values({"athlete_id": 9, "club_id": 8}) == (8, 9)

    def test_tuple_positional(self):
        assert self.binding.values((5, 6)) == (5, 6)
        assert self.binding.values([5, 6]) == (5, 6)

    def test_tuple_arity_mismatch(self):
        with pytest.raises(ValueError, match="Expected 2 key values, got 3"):
            self.binding.values((1, 2, 3))

    def test_mapping_missing_field(self):
        with pytest.raises(ValueError, match="athlete_id"):
            self.binding.values({"club_id": 1})

    def test_object_missing_field(self):
        @dataclass
        class ClubOnly:
            club_id: int

        with pytest.raises(ValueError, match="athlete_id"):
            self.binding.values(ClubOnly(1))

    def test_id_type_checked_at_construction(self):
        @dataclass
        class WrongId:
            club: int
            athlete: int

        with pytest.raises(ValueError, match="WrongId does not declare"):
            KeyBinding(["club_id", "athlete_id"], WrongId)

    def test_id_type_accepted(self):
        binding = KeyBinding(["club_id", "athlete_id"], MembershipId)
        assert binding.id_type is MembershipId

    def test_attribute_errors_other_than_missing_propagate(self):
        class Broken:
            club_id = 1

            @property
            def athlete_id(self):
                raise RuntimeError("boom")

        with pytest.raises(RuntimeError, match="boom"):
            self.binding.values(Broken())


class TestPrimaryKeyCondition:
    def test_single_column_compares_scalar(self):
        condition = primary_key_condition(primary_key_attributes(AthleteModel), 7)
        compiled = condition.compile()
        assert str(condition) == "athlete.id = :id_1"
        assert compiled.params == {"id_1": 7}

    def test_composite_row_equality(self):
        key = primary_key_attributes(ClubMembershipModel)
        condition = primary_key_condition(key, MembershipId(club_id=1, athlete_id=2))
        compiled = condition.compile()
        assert str(condition) == (
            "club_membership.club_id = :club_id_1 "
            "AND club_membership.athlete_id = :athlete_id_1"
        )
        assert compiled.params == {"club_id_1": 1, "athlete_id_1": 2}

    def test_composite_with_explicit_binding(self):
        key = primary_key_attributes(ClubMembershipModel)
        binding = KeyBinding([a.key for a in key], MembershipId)
        condition = primary_key_condition(key, (4, 5), binding)
        assert condition.compile().params == {"club_id_1": 4, "athlete_id_1": 5}

    def test_empty_key_rejected(self):
        with pytest.raises(ValueError):
            primary_key_condition([], 1)

    def test_equals_row_none_renders_is_null(self):
        condition = equals_row(primary_key_attributes(AthleteModel), [None])
        assert str(condition) == "athlete.id IS NULL"
