"""
Tests for JSON Schema Contract Validators and the action registry

Комплексное тестирование JSON Schema валидаторов и реестра:
- Валидность самих схем
- Валидация term / action_invocation / action_spec
- Детекция нарушений типов и required полей
- Исполнение JSON payload через реестр
- Manifest реестра соответствует схеме action_spec
"""

import json

import pytest
from jsonschema import ValidationError

from agentmath.actions import ActionRegistry, RegistryConfig, build_math_registry
from agentmath.actions.aggregate import AggregateAction
from agentmath.core.contracts import (
    ACTION_INVOCATION,
    ACTION_SPEC,
    CONTRACTS,
    TERM,
    contract_errors,
    contract_validator,
    load_schema,
    validate_action_invocation,
    validate_action_spec,
    validate_term,
)
from agentmath.core.contracts import validators
from agentmath.core.errors import ArityError, UnknownActionError

ALL_ACTIONS = {
    "abs", "acos", "asin", "atan", "ceil", "cos", "cosh", "degrees", "exp",
    "floor", "log", "log10", "radians", "round", "signum", "sin", "sinh",
    "sqrt", "tan", "tanh", "isprime", "nextprime", "factorial", "primefactors",
    "hypot", "stirling", "binomial",
    "sum", "average", "min", "max", "harmonicmean", "geometricmean", "maxindex", "minindex",
    "sigmoid", "pow",
}


# =============================================================================
# FIXTURES
# =============================================================================


@pytest.fixture(scope="module")
def registry():
    return build_math_registry()


@pytest.fixture
def valid_invocation():
    """Валидный action_invocation."""
    return {
        "action": "math/sigmoid",
        "arguments": [1, 1, 1, [10, [20, 30]]],
        "parallel": False,
    }


# =============================================================================
# SCHEMA LOADING
# =============================================================================


class TestSchemaLoading:
    """Тесты загрузки схем и кэша validators."""

    @pytest.mark.parametrize("contract", CONTRACTS)
    def test_schemas_load(self, contract):
        schema = load_schema(contract)
        assert schema["$schema"] == "https://json-schema.org/draft/2020-12/schema"

    def test_validator_cached(self):
        """Один скомпилированный validator на контракт."""
        assert contract_validator(TERM) is contract_validator(TERM)
        assert contract_validator(TERM) is not contract_validator(ACTION_SPEC)

    def test_unknown_contract(self):
        with pytest.raises(KeyError, match="does_not_exist"):
            load_schema("does_not_exist")

    def test_invalid_schema(self, tmp_path, monkeypatch):
        """Схема, не проходящая meta-validation → ValueError."""
        (tmp_path / "schema").mkdir()
        (tmp_path / "schema" / "term.json").write_text(json.dumps({"type": 12}), encoding="utf-8")
        monkeypatch.setattr(validators.resources, "files", lambda package: tmp_path)
        with pytest.raises(ValueError, match="Invalid JSON Schema"):
            load_schema(TERM)


# =============================================================================
# TERM
# =============================================================================


class TestTermContract:
    """Тесты term.json."""

    @pytest.mark.parametrize("term", [1, -2.5, [], [1, [2, [3.5]]], [[[]]]])
    def test_valid_terms(self, term):
        validate_term(term)

    @pytest.mark.parametrize("term", ["1", None, True, {"x": 1}, [1, "2"], [[False]]])
    def test_invalid_terms(self, term):
        with pytest.raises(ValidationError):
            validate_term(term)

    def test_is_valid(self):
        validator = contract_validator(TERM)
        assert validator.is_valid([1, 2])
        assert not validator.is_valid("x")

    def test_deep_nesting_valid(self):
        term = [1]
        for _ in range(50):
            term = [term]
        validate_term(term)


# =============================================================================
# ACTION INVOCATION
# =============================================================================


class TestActionInvocationContract:
    """Тесты action_invocation.json."""

    def test_valid(self, valid_invocation):
        validate_action_invocation(valid_invocation)

    def test_parallel_optional(self, valid_invocation):
        del valid_invocation["parallel"]
        validate_action_invocation(valid_invocation)

    @pytest.mark.parametrize("field", ["action", "arguments"])
    def test_required_fields(self, valid_invocation, field):
        del valid_invocation[field]
        with pytest.raises(ValidationError, match=field):
            validate_action_invocation(valid_invocation)

    @pytest.mark.parametrize("name", ["Math/sigmoid", "math//sigmoid", "", "math/"])
    def test_invalid_action_name(self, valid_invocation, name):
        valid_invocation["action"] = name
        with pytest.raises(ValidationError):
            validate_action_invocation(valid_invocation)

    def test_non_numeric_argument(self, valid_invocation):
        valid_invocation["arguments"] = [1, ["x"]]
        with pytest.raises(ValidationError):
            validate_action_invocation(valid_invocation)

    def test_extra_field_rejected(self, valid_invocation):
        valid_invocation["context"] = {}
        with pytest.raises(ValidationError):
            validate_action_invocation(valid_invocation)

    def test_contract_errors_lists_every_violation(self):
        errors = contract_errors(ACTION_INVOCATION, {"parallel": "yes"})
        assert "$: 'action' is a required property" in errors
        assert "$: 'arguments' is a required property" in errors
        assert any(error.startswith("$.parallel:") for error in errors)

    def test_contract_errors_empty_for_valid(self, valid_invocation):
        assert contract_errors(ACTION_INVOCATION, valid_invocation) == []


# =============================================================================
# REGISTRY
# =============================================================================


class TestActionRegistry:
    """Тесты ActionRegistry и build_math_registry."""

    def test_all_actions_registered(self, registry):
        assert len(registry) == len(ALL_ACTIONS)
        assert registry.names() == sorted(f"math/{name}" for name in ALL_ACTIONS)

    def test_contains(self, registry):
        assert "math/stirling" in registry
        assert "math/nope" not in registry

    def test_unknown_action(self, registry):
        with pytest.raises(UnknownActionError, match="math/nope"):
            registry.get("math/nope")
        with pytest.raises(KeyError):
            registry.invoke("math/nope", [1])

    def test_custom_namespace(self):
        custom = build_math_registry(RegistryConfig(namespace="agent/math"))
        assert "agent/math/sigmoid" in custom
        bare = build_math_registry(RegistryConfig(namespace=""))
        assert "sum" in bare

    def test_duplicate_registration(self):
        registry = ActionRegistry()
        registry.register(AggregateAction("x/len", lambda values, action: len(values)))
        with pytest.raises(ValueError, match="already registered"):
            registry.register(AggregateAction("x/len", lambda values, action: 0))

    def test_iteration(self, registry):
        assert {action.name for action in registry} == set(registry.names())

    def test_minimal_arguments(self, registry):
        assert registry.get("math/sigmoid").minimal_arguments == 3
        assert registry.get("math/stirling").minimal_arguments == 2
        assert registry.get("math/pow").minimal_arguments == 2
        assert registry.get("math/harmonicmean").minimal_arguments == 1
        assert registry.get("math/sin").minimal_arguments == 1

    def test_invoke(self, registry):
        assert registry.invoke("math/stirling", [3, 2, 8, 3]) == [3, 966]

    def test_invoke_payload(self, registry, valid_invocation):
        result = registry.invoke_payload(valid_invocation)
        assert len(result) == 4

    def test_invoke_payload_json_roundtrip(self, registry):
        payload = json.loads('{"action": "math/harmonicmean", "arguments": [[150, 50]]}')
        assert registry.invoke_payload(payload) == [75.0]

    def test_invoke_payload_validates_first(self, registry):
        with pytest.raises(ValidationError):
            registry.invoke_payload({"action": "math/sum", "arguments": [True]})

    def test_invoke_payload_arity(self, registry):
        with pytest.raises(ArityError):
            registry.invoke_payload({"action": "math/sigmoid", "arguments": [1, 2]})

    def test_manifest_matches_schema(self, registry):
        manifest = registry.manifest()
        validator = contract_validator(ACTION_SPEC)
        assert len(manifest) == len(registry)
        for entry in manifest:
            validator.validate(entry)

    def test_manifest_disciplines(self, registry):
        disciplines = {entry["name"]: entry["discipline"] for entry in registry.manifest()}
        assert disciplines["math/sin"] == "elementwise"
        assert disciplines["math/stirling"] == "windowed"
        assert disciplines["math/geometricmean"] == "aggregate"
        assert disciplines["math/sigmoid"] == "parameterized"


class TestActionSpecContract:
    """Тесты action_spec.json."""

    def test_invalid_entry(self):
        with pytest.raises(ValidationError):
            validate_action_spec({"name": "math/x", "minimal_arguments": -1, "discipline": "aggregate"})
        with pytest.raises(ValidationError):
            validate_action_spec({"name": "math/x", "minimal_arguments": 1, "discipline": "other"})
