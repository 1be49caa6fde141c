import pytest

from recite import storage
from recite.keys import Key, KeyFilter
from recite.word import Word
from recite.wordbook import WordBook


@pytest.fixture
def key_filter():
    return KeyFilter()


@pytest.fixture
def book(tmp_path, key_filter):
    return WordBook(tmp_path / "config.json", tmp_path / "WordList", key_filter)


def _store_pages(tmp_path, pages, cur):
    word_dir = tmp_path / "WordList"
    word_dir.mkdir()
    for number, page in enumerate(pages, start=1):
        storage.write_words(page, word_dir / f"{number}.json")
    storage.write_config(tmp_path / "config.json", cur, len(pages))


def test_read_config_creates_missing_file(book, tmp_path):
    book.read_config()
    assert (book.cur_page_index, book.count_word_list) == (0, 0)
    assert storage.read_config(tmp_path / "config.json") == (0, 0)


def test_first_run_starts_with_placeholder_page(book, tmp_path):
    book.read_config()
    book.read_all()
    assert book.pages == [{"NaN": Word.placeholder()}]
    assert (book.cur_page_index, book.count_word_list) == (1, 1)
    assert storage.read_config(tmp_path / "config.json") == (1, 1)
    assert all(tree.page_index == 1 for tree in book.trees)
    assert book.page_label == "1/1"


def test_read_all_loads_pages_independently(book, tmp_path):
    apple = Word(page_index=1, spelling="apple", meanings=["fruit"])
    pear = Word(page_index=2, spelling="pear", meanings=["fruit"])
    _store_pages(tmp_path, [{"apple": apple}, {"pear": pear}], cur=2)
    book.read_config()
    book.read_all()
    assert book.pages == [{"apple": apple}, {"pear": pear}]
    assert book.current_page == {"pear": pear}
    assert book.progress == 100


def test_read_all_ignores_inconsistent_config(book, tmp_path):
    storage.write_config(tmp_path / "config.json", 3, 1)
    book.read_config()
    book.read_all()
    assert book.pages == []
    assert (tmp_path / "WordList").is_dir()


def test_save_round_trip(book, tmp_path):
    book.read_config()
    book.read_all()
    book.save()
    assert storage.read_words(tmp_path / "WordList" / "1.json") == {"NaN": Word.placeholder()}
    assert storage.read_config(tmp_path / "config.json") == (1, 1)


def test_update_config_without_change_writes_nothing(book, tmp_path):
    book.read_config()
    book.read_all()
    (tmp_path / "config.json").unlink()
    book.update_config(1, 1)
    assert not (tmp_path / "config.json").exists()
    assert (book.cur_page_index, book.count_word_list) == (1, 1)
    assert book.page_label == "1/1"


def test_key_i_and_r_switch_modes(book, key_filter):
    changes = []
    book.edit_mode_changed.connect(changes.append)
    book.read_config()
    book.read_all()

    assert key_filter.filter(Key.I) is True
    assert book.edit_mode is True
    assert book.mode_label == "Edit"
    assert book.active_tree is book.edit_tree
    assert [item.texts[0] for item in book.edit_tree.top_level] == ["NaN"]

    key_filter.filter(Key.R)
    assert book.edit_mode is False
    assert book.mode_label == "Recite"
    assert [item.texts[0] for item in book.recite_tree.top_level] == ["NaN"]
    assert changes == [True, False]


def test_enter_in_recite_mode_selects_word(book):
    received = []
    book.selected_word_changed.connect(received.append)
    book.read_config()
    book.read_all()
    book.show_words()
    tree = book.recite_tree
    tree.select(tree.top_level[0])
    tree.key_press(Key.ENTER)
    assert book.selected_word == Word.placeholder()
    assert received == [Word.placeholder()]


def test_adding_word_in_edit_mode_is_saved(book, key_filter, tmp_path):
    apple = Word(page_index=1, spelling="apple", meanings=["fruit"])
    _store_pages(tmp_path, [{"apple": apple}], cur=1)
    book.read_config()
    book.read_all()
    key_filter.filter(Key.I)

    tree = book.edit_tree
    tree.select(tree.top_level[0])
    book.set_top_template(Word(spelling="banana"))
    tree.key_press(Key.A)

    assert set(book.current_page) == {"apple", "banana"}
    assert book.selected_word.spelling == "banana"
    book.save()
    stored = storage.read_words(tmp_path / "WordList" / "1.json")
    assert set(stored) == {"apple", "banana"}


def test_templates_ignore_none(book):
    word = Word(spelling="kite")
    book.set_bottom_template(word)
    book.set_bottom_template(None)
    assert book.edit_tree.bottom_template is word
    book.set_top_template(None)
    assert book.edit_tree.top_template is None


def test_show_words_without_pages_raises(book):
    with pytest.raises(IndexError):
        book.show_words()


def test_create_word_list_dir_keeps_existing_files(book, tmp_path):
    book.create_word_list_dir()
    apple = Word(page_index=1, spelling="apple", meanings=["fruit"])
    page_path = tmp_path / "WordList" / "1.json"
    storage.write_words({"apple": apple}, page_path)
    book.create_word_list_dir()
    assert storage.read_words(page_path) == {"apple": apple}