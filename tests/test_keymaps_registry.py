import pytest

from termedit.actions import commands as cmd
from termedit.keymaps import (
    DEFAULT_BINDINGS,
    Binding,
    KeyStroke,
    KeymapConflictError,
    KeymapRegistry,
    load_default_keymaps,
)


def make_binding(
    *,
    binding_id: str,
    mode: str = "editing",
    token: str = "ctrl+k",
    command: cmd.Command | None = None,
) -> Binding:
    return Binding(
        id=binding_id,
        mode=mode,
        stroke=KeyStroke.parse(token),
        command=command or cmd.Cut(),
    )


def test_keystroke_normalizes_modifiers() -> None:
    stroke = KeyStroke("LEFT", ("Shift", "ctrl", "shift"))

    assert stroke.modifiers == ("ctrl", "shift")
    assert stroke.token == "ctrl+shift+LEFT"
    assert KeyStroke.parse("ctrl+shift+LEFT") == stroke
    assert KeyStroke.parse("ctrl++").key == "+"


def test_register_binding_success() -> None:
    registry = KeymapRegistry()
    binding = make_binding(binding_id="editing.cut_k")

    registry.register_binding(binding)

    assert registry.stats().binding_count == 1
    assert list(registry.iter_bindings(mode="editing")) == [binding]
    assert registry.lookup("editing", "ctrl+k") == binding


def test_register_binding_conflict_detection() -> None:
    registry = KeymapRegistry()
    registry.register_binding(make_binding(binding_id="editing.cut_k"))

    with pytest.raises(KeymapConflictError) as excinfo:
        registry.register_binding(make_binding(binding_id="editing.cut_k.duplicate"))

    assert [b.id for b in excinfo.value.conflicts] == ["editing.cut_k"]


def test_same_key_in_different_modes_does_not_conflict() -> None:
    registry = KeymapRegistry()

    registry.register_binding(make_binding(binding_id="editing.k"))
    registry.register_binding(make_binding(binding_id="finding.k", mode="finding"))

    assert registry.stats().modes == ("editing", "finding")


def test_duplicate_id_without_replace_raises() -> None:
    registry = KeymapRegistry()
    registry.register_binding(make_binding(binding_id="binding"))

    with pytest.raises(ValueError):
        registry.register_binding(make_binding(binding_id="binding", token="ctrl+j"))


def test_register_binding_with_replace() -> None:
    registry = KeymapRegistry()

    first = make_binding(binding_id="binding")
    second = make_binding(binding_id="binding", command=cmd.Copy())

    registry.register_binding(first)
    registry.register_binding(second, replace=True)

    assert list(registry.iter_bindings()) == [second]


def test_replace_evicts_conflicting_binding() -> None:
    registry = KeymapRegistry()
    registry.register_binding(make_binding(binding_id="old"))

    registry.register_binding(make_binding(binding_id="new"), replace=True)

    assert registry.lookup("editing", "ctrl+k").id == "new"
    with pytest.raises(KeyError):
        registry.get_binding("old")


def test_unregister_binding() -> None:
    registry = KeymapRegistry()
    binding = make_binding(binding_id="binding")
    registry.register_binding(binding)
    before = registry.revision()

    removed = registry.unregister_binding("binding")

    assert removed == binding
    assert registry.stats().binding_count == 0
    assert registry.lookup("editing", "ctrl+k") is None
    assert registry.revision() == before + 1
    assert registry.unregister_binding("binding") is None


def test_load_default_keymaps_registers_everything() -> None:
    registry = KeymapRegistry()

    load_default_keymaps(registry)

    assert registry.stats().binding_count == len(DEFAULT_BINDINGS)
    assert registry.lookup("editing", "ctrl+q").command == cmd.Quit()
    assert registry.lookup("editing", "ctrl+z").command == cmd.Undo()
    assert registry.lookup("finding", "ESC").command == cmd.CancelPrompt()
    assert registry.lookup("save_file", "ENTER").command == cmd.ConfirmSaveFile()


def test_load_default_keymaps_exclude_and_extra() -> None:
    registry = KeymapRegistry()
    custom = make_binding(binding_id="editing.quit", token="ctrl+w", command=cmd.Quit())

    load_default_keymaps(
        registry,
        exclude_bindings=("editing.cut",),
        extra_bindings=(custom,),
    )

    assert registry.lookup("editing", "ctrl+x") is None
    assert registry.lookup("editing", "ctrl+q") is None
    assert registry.get_binding("editing.quit").key_signature == "ctrl+w"
