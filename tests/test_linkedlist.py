import pytest

from solong.linkedlist import LinkedList, Node


def test_push_back_keeps_argument_order():
    items = ["one", "two", "three"]
    lst = LinkedList()
    for item in items:
        lst.push_back(item)
    assert list(lst) == items


def test_push_front_reverses_order():
    items = ["one", "two", "three"]
    lst = LinkedList()
    for item in items:
        lst.push_front(item)
    assert list(lst) == list(reversed(items))


def test_constructor_from_iterable():
    items = ["a", "b", "c"]
    assert list(LinkedList(items)) == items


def test_len_counts_nodes():
    lst = LinkedList(["Premier", "Deuxieme", "Troisieme"])
    assert len(lst) == 3
    lst.push_front("zero")
    assert len(lst) == 4


def test_empty_list_properties():
    lst = LinkedList()
    assert len(lst) == 0
    assert list(lst) == []
    assert lst.last() is None


def test_last_returns_final_node():
    lst = LinkedList(["Premier", "Deuxieme", "Troisieme"])
    last = lst.last()
    assert isinstance(last, Node)
    assert last.content == "Troisieme"
    assert last.next is None


def test_last_after_push_front_on_empty():
    lst = LinkedList()
    lst.push_front("x")
    assert lst.last().content == "x"
    lst.push_back("y")
    assert lst.last().content == "y"


def test_new_node_has_no_successor():
    node = LinkedList().push_back("Contenu du noeud")
    assert node.content == "Contenu du noeud"
    assert node.next is None


def test_pop_front_calls_delete_and_returns_content():
    deleted = []
    lst = LinkedList(["Hello", "world"])
    assert lst.pop_front(deleted.append) == "Hello"
    assert deleted == ["Hello"]
    assert list(lst) == ["world"]


def test_pop_front_until_empty_resets_tail():
    lst = LinkedList(["only"])
    assert lst.pop_front() == "only"
    assert lst.last() is None
    lst.push_back("again")
    assert list(lst) == ["again"]


def test_pop_front_empty_raises():
    with pytest.raises(IndexError):
        LinkedList().pop_front()


def test_clear_deletes_from_last_to_first():
    items = ["a", "b", "c"]
    deleted = []
    lst = LinkedList(items)
    lst.clear(deleted.append)
    assert deleted == list(reversed(items))
    assert len(lst) == 0
    assert list(lst) == []


def test_clear_without_delete_empties():
    lst = LinkedList(["a", "b"])
    lst.clear()
    assert list(lst) == []
    assert lst.last() is None


def test_for_each_visits_in_order():
    items = ["Premier element", "Deuxieme element", "Troisieme element"]
    seen = []
    LinkedList(items).for_each(seen.append)
    assert seen == items


def test_map_builds_new_list_and_leaves_original():
    items = ["hello", "world", "test"]
    source = LinkedList(items)
    mapped = source.map(str.upper)
    assert list(mapped) == [item.upper() for item in items]
    assert list(source) == items
    assert len(mapped) == len(source)


def test_map_of_empty_is_empty():
    assert list(LinkedList().map(str.upper)) == []


def test_map_failure_releases_partial_result():
    deleted = []
    source = LinkedList(["keep", "drop", "never"])

    def transform(content):
        return None if content == "drop" else content.upper()

    with pytest.raises(ValueError):
        source.map(transform, deleted.append)
    assert deleted == ["KEEP"]
    assert list(source) == ["keep", "drop", "never"]