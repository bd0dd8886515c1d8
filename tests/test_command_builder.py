"""Tests for CommandBuilder."""

from vmcli.models import VirtualDiskType, VmResetOpType
from vmcli.modules.command import CommandBuilder


class TestCommandBuilder:
    """Test ordered token accumulation."""

    def test_tokens_kept_in_order(self):
        builder = CommandBuilder("vm.vmx", "Power").add("Start")

        assert builder.build() == ["vm.vmx", "Power", "Start"]

    def test_non_string_tokens_are_stringified(self):
        assert CommandBuilder().add(42, 1.5).build() == ["42", "1.5"]

    def test_enum_tokens_use_their_value(self):
        builder = CommandBuilder().add(VmResetOpType.HARD, VirtualDiskType.SINGLE_PREALLOCATED)

        assert builder.build() == ["hard", "2"]

    def test_true_flag_adds_name_only(self):
        assert CommandBuilder().add_flag("-p", True).build() == ["-p"]

    def test_false_flag_adds_nothing(self):
        assert CommandBuilder().add_flag("-p", False).build() == []

    def test_none_and_blank_values_are_skipped(self):
        builder = CommandBuilder().add_flag("-d", None).add_flag("-w", "").add_flag("-e", "   ")

        assert len(builder) == 0

    def test_valued_flag_adds_name_and_value(self):
        builder = CommandBuilder().add_flag("-o", VmResetOpType.TRY_SOFT).add_flag("-si", 0)

        assert builder.build() == ["-o", "trySoft", "-si", "0"]

    def test_json_format(self):
        assert CommandBuilder("vm.vmx").json_format().build() == ["vm.vmx", "--format", "json"]

    def test_build_returns_a_copy(self):
        builder = CommandBuilder("a")
        tokens = builder.build()
        tokens.append("b")

        assert builder.build() == ["a"]

    def test_repr(self):
        assert repr(CommandBuilder("a", "b")) == "CommandBuilder(['a', 'b'])"
