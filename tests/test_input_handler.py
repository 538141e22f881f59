from termedit.actions import commands as cmd
from termedit.modes import InputHandler, InputMode, KeyInput, PromptState


def make_handler() -> InputHandler:
    return InputHandler(PromptState())


def test_printable_key_inserts_in_editing_mode() -> None:
    handler = make_handler()

    assert handler.handle_key(KeyInput("a", text="a")) == cmd.InsertChar("a")
    assert handler.handle_key(KeyInput(" ", text=" ")) == cmd.InsertChar(" ")


def test_bound_keys_produce_commands() -> None:
    handler = make_handler()

    assert handler.handle_key(KeyInput("z", ("ctrl",))) == cmd.Undo()
    assert handler.handle_key(KeyInput("LEFT")) == cmd.MoveLeft()
    assert handler.handle_key(KeyInput("LEFT", ("ctrl",))) == cmd.MoveLeft()
    assert handler.handle_key(KeyInput("ENTER")) == cmd.InsertNewline()


def test_unbound_control_keys_are_ignored() -> None:
    handler = make_handler()

    assert handler.handle_key(KeyInput("k", ("ctrl",), text="k")) is None
    assert handler.handle_key(KeyInput("TAB")) is None


def test_prompt_mode_collects_text() -> None:
    handler = make_handler()
    handler.prompt.start(InputMode.FINDING)

    for char in "abc":
        assert handler.handle_key(KeyInput(char, text=char)) is None
    handler.handle_key(KeyInput("BACKSPACE"))

    assert handler.prompt.find_input == "ab"
    assert handler.prompt.status_text() == "Find: ab"
    assert handler.handle_key(KeyInput("ENTER")) == cmd.ConfirmFind()
    assert handler.handle_key(KeyInput("ESC")) == cmd.CancelPrompt()


def test_editing_shortcuts_are_not_active_in_prompts() -> None:
    handler = make_handler()
    handler.prompt.start(InputMode.SAVE_FILE)

    assert handler.handle_key(KeyInput("z", ("ctrl",))) is None
    assert handler.prompt.filename_input == ""


def test_prompt_state_start_resets_inputs() -> None:
    prompt = PromptState(find_input="old", confirmed_find_term="old")

    prompt.start(InputMode.FINDING)

    assert prompt.find_input == ""
    assert prompt.confirmed_find_term is None
    assert prompt.mode is InputMode.FINDING
    prompt.finish()
    assert prompt.status_text("saved") == "saved"
