"""Unit tests for domain enums."""

from tiny_ioc.domain.enums import ABSENT, Absent, ContainerState, Lifetime, MissingDependencyPolicy


class TestLifetime:
    """Test cases for the Lifetime enum."""

    def test_lifetime_values(self):
        """Test that lifetimes carry their string values."""
        assert Lifetime.SINGLETON.value == "singleton"
        assert Lifetime.TRANSIENT.value == "transient"

    def test_lifetime_str(self):
        """Test string conversion returns the value."""
        assert str(Lifetime.SINGLETON) == "singleton"

    def test_lifetime_from_string(self):
        """Test building a lifetime from its value."""
        assert Lifetime("transient") is Lifetime.TRANSIENT

    def test_lifetime_has_no_scoped_member(self):
        """Test that only singleton and transient lifetimes exist."""
        assert {member.value for member in Lifetime} == {"singleton", "transient"}


class TestContainerState:
    """Test cases for the ContainerState enum."""

    def test_states(self):
        """Test the two lifecycle states."""
        assert [state.value for state in ContainerState] == ["uninitialized", "ready"]

    def test_state_str(self):
        assert str(ContainerState.READY) == "ready"


class TestMissingDependencyPolicy:
    """Test cases for the MissingDependencyPolicy enum."""

    def test_policy_from_string(self):
        """Test policies can be parsed from configuration strings."""
        assert MissingDependencyPolicy("fail_fast") is MissingDependencyPolicy.FAIL_FAST
        assert MissingDependencyPolicy("placeholder") is MissingDependencyPolicy.PLACEHOLDER

    def test_policy_str(self):
        assert str(MissingDependencyPolicy.FAIL_FAST) == "fail_fast"


class TestAbsent:
    """Test cases for the ABSENT sentinel."""

    def test_absent_is_singleton_member(self):
        """Test that ABSENT is the only member of Absent."""
        assert ABSENT is Absent.ABSENT
        assert list(Absent) == [ABSENT]

    def test_absent_is_distinct_from_none(self):
        """Test that ABSENT never compares equal to None."""
        assert ABSENT is not None
        assert ABSENT != None  # noqa: E711

    def test_absent_is_falsy(self):
        assert not ABSENT

    def test_absent_repr(self):
        assert repr(ABSENT) == "ABSENT"
