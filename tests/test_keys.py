from egakeru.keys import Key


def test_printable_keys_match_ascii():
    assert Key(ord(" ")) is Key.SPACE
    assert Key(ord("A")) is Key.A
    assert Key(ord("Z")) is Key.Z
    assert Key(ord("0")) is Key.KEY_0


def test_key_count_aliases_menu():
    assert Key.KEY_COUNT is Key.MENU
    assert Key(348) is Key.MENU


def test_letters_are_contiguous():
    letters = [Key(c) for c in range(ord("A"), ord("Z") + 1)]
    assert [k.name for k in letters] == [chr(c) for c in range(ord("A"), ord("Z") + 1)]


def test_lookup_by_value():
    assert Key(257) is Key.ENTER
    assert Key(259) is Key.BACKSPACE