"""Tests for the computer spec builder (core/builder.py).

Coverage:
* Required fields are validated only at ``build()``.
* Built specs carry exactly the fields that were set.
* Setters chain and the built spec is independent of the builder.
"""

from __future__ import annotations

import pytest

from pattern_demo.core.builder import ComputerSpecBuilder
from pattern_demo.core.models import ComputerSpec
from pattern_demo.core.protocols import ComputerBuilder
from pattern_demo.exceptions import ValidationError


def _builder(**parts: str | None) -> ComputerSpecBuilder:
    builder = ComputerSpecBuilder()
    for name, value in parts.items():
        getattr(builder, f"set_{name}")(value)
    return builder


# ---------------------------------------------------------------------------
# Validation
# ---------------------------------------------------------------------------

class TestBuildValidation:
    def test_missing_cpu(self) -> None:
        with pytest.raises(ValidationError, match="CPU is required") as exc_info:
            _builder(ram="16GB").build()
        assert exc_info.value.missing_fields == ("CPU",)

    def test_missing_ram(self) -> None:
        with pytest.raises(ValidationError, match="RAM is required") as exc_info:
            _builder(cpu="Intel i7").build()
        assert exc_info.value.missing_fields == ("RAM",)

    def test_missing_both(self) -> None:
        with pytest.raises(ValidationError, match="CPU and RAM are required!") as exc_info:
            ComputerSpecBuilder().build()
        assert exc_info.value.missing_fields == ("CPU", "RAM")

    def test_empty_string_counts_as_missing(self) -> None:
        with pytest.raises(ValidationError):
            _builder(cpu="", ram="16GB").build()

    def test_explicit_none_counts_as_missing(self) -> None:
        with pytest.raises(ValidationError):
            _builder(cpu="Intel i7", ram=None).build()

    def test_hint_names_setter(self) -> None:
        with pytest.raises(ValidationError) as exc_info:
            _builder(cpu="Intel i7").build()
        assert exc_info.value.hint is not None
        assert "set_ram()" in exc_info.value.hint

    def test_setters_do_not_validate(self) -> None:
        builder = ComputerSpecBuilder().set_cpu("").set_ram(None)
        assert isinstance(builder, ComputerSpecBuilder)

    @pytest.mark.parametrize(
        "optional",
        [{}, {"storage": "1TB"}, {"gpu": "RTX 4070"}, {"storage": "1TB", "gpu": "RTX 4070"}],
    )
    def test_optional_fields_never_required(self, optional: dict[str, str]) -> None:
        spec = _builder(cpu="Intel i7", ram="16GB", **optional).build()
        assert isinstance(spec, ComputerSpec)


# ---------------------------------------------------------------------------
# Field fidelity
# ---------------------------------------------------------------------------

class TestBuildFields:
    def test_demo_fields(self) -> None:
        spec = (
            ComputerSpecBuilder()
            .set_cpu("Intel i7")
            .set_ram("16GB")
            .set_storage("512GB SSD")
            .set_gpu(None)
            .build()
        )
        assert spec.cpu == "Intel i7"
        assert spec.ram == "16GB"
        assert spec.storage == "512GB SSD"
        assert spec.gpu is None

    def test_all_fields(self) -> None:
        spec = _builder(cpu="Ryzen 7", ram="32GB", storage="2TB", gpu="RX 7800").build()
        assert spec == ComputerSpec(cpu="Ryzen 7", ram="32GB", storage="2TB", gpu="RX 7800")

    def test_last_setter_call_wins(self) -> None:
        spec = ComputerSpecBuilder().set_cpu("a").set_cpu("b").set_ram("c").build()
        assert spec.cpu == "b"


# ---------------------------------------------------------------------------
# Chaining and independence
# ---------------------------------------------------------------------------

class TestBuilderChaining:
    def test_satisfies_computer_builder_protocol(self) -> None:
        assert isinstance(ComputerSpecBuilder(), ComputerBuilder)

    def test_builds_through_protocol_type(self) -> None:
        builder: ComputerBuilder = ComputerSpec.builder()
        spec = builder.set_cpu("Intel i7").set_ram("16GB").build()
        assert spec == ComputerSpec(cpu="Intel i7", ram="16GB")

    def test_setters_return_same_builder(self) -> None:
        builder = ComputerSpecBuilder()
        assert builder.set_cpu("x") is builder
        assert builder.set_ram("x") is builder
        assert builder.set_storage("x") is builder
        assert builder.set_gpu("x") is builder

    def test_setter_after_build_leaves_spec_untouched(self) -> None:
        builder = _builder(cpu="Intel i7", ram="16GB")
        spec = builder.build()
        builder.set_cpu("changed").set_gpu("RTX 4070")
        assert spec.cpu == "Intel i7"
        assert spec.gpu is None

    def test_builders_share_no_state(self) -> None:
        first = _builder(cpu="a", ram="b")
        second = ComputerSpecBuilder()
        first.build()
        with pytest.raises(ValidationError):
            second.build()
