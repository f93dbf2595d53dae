"""Tests for the Maybe monad used by Either.to_maybe and List.head."""

import pytest

from monadic import NOTHING, Left, List, Maybe, Nothing, Right, Some, nothing, some
from tests.monad_test_base import MonadTestCase


class TestMaybe(MonadTestCase):
    """Test Some/Nothing behaviour."""

    def test_coerce(self):
        assert Maybe.coerce(1) == Some(1)
        assert Maybe.coerce(None) is NOTHING

    def test_none_singleton(self):
        assert Maybe.none() is NOTHING
        assert nothing() is NOTHING
        assert Nothing() == NOTHING

    def test_some_rejects_none(self):
        with pytest.raises(ValueError, match="Some cannot contain None"):
            Some(None)

    def test_some_helper(self):
        assert some(3) == Some(3)

    def test_predicates(self):
        assert Some(1).is_some()
        assert not Some(1).is_none()
        assert NOTHING.is_none()

    def test_bind(self):
        assert Some(2).bind(lambda x: Some(x + 1)) == Some(3)
        assert NOTHING.bind(lambda x: Some(x)) is NOTHING

    def test_fmap_coerces_none_result(self):
        assert Some(2).fmap(lambda x: x * 2) == Some(4)
        self.assert_nothing(Some(2).fmap(lambda x: None))

    def test_tee(self):
        s = Some(1)
        assert s.tee(lambda x: Some("other")) is s
        assert s.tee(lambda x: NOTHING) is NOTHING

    def test_value_or(self):
        assert Some(1).value_or(0) == 1
        assert NOTHING.value_or(0) == 0

    def test_or(self):
        assert NOTHING.or_(5) == 5
        assert NOTHING.or_(lambda: "computed") == "computed"
        assert NOTHING.or_(lambda a, b: a + b, 1, 2) == 3

    def test_or_fmap(self):
        assert NOTHING.or_fmap(5) == Some(5)
        assert NOTHING.or_fmap(None) is NOTHING

    def test_to_either(self):
        assert Some(1).to_either("missing") == Right(1)
        assert NOTHING.to_either("missing") == Left("missing")

    def test_to_list(self):
        assert Some(1).to_list() == List.of(1)
        assert NOTHING.to_list() is List.EMPTY

    def test_repr(self):
        assert repr(Some(1)) == "Some(1)"
        assert repr(NOTHING) == "Nothing"

    def test_fmap2(self):
        assert Some(List.of(1, 2)).fmap2(str) == Some(List.of("1", "2"))
