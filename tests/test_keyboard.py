from studytimer.keyboard import KeyboardHandler


def _flags(handler):
    return (
        handler.new_tab_requested,
        handler.close_tab_requested,
        handler.split_horizontal_requested,
        handler.split_vertical_requested,
        handler.close_split_requested,
    )


def test_ctrl_t_requests_new_tab():
    handler = KeyboardHandler(use_mac_cmd=False)
    handler.handle_input(["T"], ctrl=True)
    assert _flags(handler) == (True, False, False, False, False)


def test_ctrl_w_requests_close_tab_lowercase_key():
    handler = KeyboardHandler(use_mac_cmd=False)
    handler.handle_input(["w"], ctrl=True)
    assert handler.close_tab_requested is True
    assert handler.new_tab_requested is False


def test_without_modifier_nothing_requested():
    handler = KeyboardHandler(use_mac_cmd=False)
    handler.handle_input(["T", "W", "H", "V", "X"], shift=True)
    assert _flags(handler) == (False,) * 5


def test_split_needs_shift():
    handler = KeyboardHandler(use_mac_cmd=False)
    handler.handle_input(["H"], ctrl=True)
    assert handler.split_horizontal_requested is False
    handler.handle_input(["H", "V", "X"], ctrl=True, shift=True)
    assert handler.split_horizontal_requested is True
    assert handler.split_vertical_requested is True
    assert handler.close_split_requested is True


def test_flags_reset_each_frame():
    handler = KeyboardHandler(use_mac_cmd=False)
    handler.handle_input(["T"], ctrl=True)
    handler.handle_input([], ctrl=True)
    assert _flags(handler) == (False,) * 5


def test_mac_mode_uses_command_key():
    handler = KeyboardHandler(use_mac_cmd=True)
    handler.handle_input(["T"], ctrl=True)
    assert handler.new_tab_requested is False
    handler.handle_input(["T"], mac_cmd=True)
    assert handler.new_tab_requested is True