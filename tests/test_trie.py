import pytest

from chartrie import EmptyWordError, Trie, TrieNode


def test_empty_trie():
    t = Trie()
    assert len(t) == 0
    assert not t
    assert list(t) == []
    assert t.compute_size() == 0
    assert "a" not in t
    assert t.get("a") is None
    assert t.remove("a") is False
    assert t.words_with_prefix("a") == []


def test_insert_and_search():
    t = Trie()
    for w in ["car", "card", "cart", "cat"]:
        assert t.insert(w) is True

    assert "car" in t
    assert "card" in t
    assert "cart" in t
    assert "cat" in t

    assert "ca" not in t
    assert "cars" not in t
    assert "dog" not in t
    assert len(t) == 4


def test_insert_duplicate_keeps_count():
    t = Trie(["dog", "dog", "do"])
    assert len(t) == 2
    assert t.insert("dog") is False
    assert len(t) == 2


def test_routes_by_first_character():
    t = Trie(["apple", "banana", "avocado", "blueberry"])
    assert [root.key for root in t.roots] == ["a", "b"]
    assert list(t) == ["apple", "avocado", "banana", "blueberry"]
    assert t.compute_size() == sum(root.compute_size() for root in t.roots)


def test_has_prefix():
    t = Trie(["apple", "app", "apply"])
    assert t.has_prefix("ap")
    assert t.has_prefix("app")
    assert t.has_prefix("apple")
    assert not t.has_prefix("banana")


def test_delete():
    t = Trie(["bat", "batch", "bath"])

    assert t.remove("bat") is True
    assert "bat" not in t
    assert "batch" in t
    assert "bath" in t

    assert t.remove("batch") is True
    assert "batch" not in t
    assert "bath" in t

    assert t.remove("bath") is True
    assert "bath" not in t
    assert not t
    assert t.roots == []

    assert t.remove("batman") is False


def test_remove_drops_only_empty_roots():
    t = Trie(["cat", "cow", "dog"])
    assert t.remove("dog") is True
    assert [root.key for root in t.roots] == ["c"]
    assert t.remove("cat") is True
    assert [root.key for root in t.roots] == ["c"]
    assert len(t) == 1


def test_remove_single_character_word():
    t = Trie(["a", "ab"])
    assert t.remove("a") is True
    assert "ab" in t
    assert t.remove("ab") is True
    assert not t


def test_words_with_prefix():
    t = Trie(["dog", "door", "doom", "doll", "cat"])
    assert set(t.words_with_prefix("do")) == {"dog", "door", "doom", "doll"}
    assert t.words_with_prefix("c") == ["cat"]
    assert t.words_with_prefix("cat") == ["cat"]
    assert t.words_with_prefix("z") == []


def test_equality_and_repr():
    a = Trie(["dog", "dot"])
    b = Trie(["dog"])
    assert a != b
    b.insert("dot")
    assert a == b
    assert repr(Trie(["a"])) == "Trie([TrieNode('a', boundary=True)])"
    assert a.roots[0] == TrieNode("d", children=[
        TrieNode("o", children=[TrieNode.empty("g"), TrieNode.empty("t")]),
    ])


def test_pretty():
    assert Trie(["ab", "c"]).pretty() == "a\n  b*\nc*"


def test_empty_word_rejected():
    t = Trie()
    with pytest.raises(EmptyWordError):
        t.insert("")
    with pytest.raises(EmptyWordError):
        t.remove("")
    with pytest.raises(EmptyWordError):
        t.get("")


def test_long_word_in_trie():
    word = "ab" * 1500
    t = Trie([word])
    assert t.insert(word) is False
    assert word in t
    assert t.compute_size() == 3000
    assert t.words_with_prefix("ab" * 1000) == [word]
    assert t.remove(word) is True
    assert not t


def test_error_messages_match_node():
    with pytest.raises(EmptyWordError) as from_trie:
        Trie().insert("")
    with pytest.raises(EmptyWordError) as from_node:
        TrieNode.from_word("a").insert("")
    assert str(from_trie.value) == str(from_node.value)
    with pytest.raises(ValueError):
        Trie().insert(["ab"])
