import pytest

from confdesk import core


def test_workshop_summary_format():
    ids = core.IdSequence()
    w = core.create_workshop(ids, "AI Day", 50, "ML", "Acme")
    assert w.summary() == "Workshop [1] AI Day | Topic: ML | Company: Acme | Capacity: 50"


def test_seminar_summary_format():
    ids = core.IdSequence(start=2)
    s = core.create_seminar(ids, "Intro", 30, "Dr. X")
    assert s.summary() == "Seminar  [2] Intro | Speaker: Dr. X | Capacity: 30"


def test_blank_fields_get_defaults():
    ids = core.IdSequence()
    w = core.create_workshop(ids, "   ", 0, "", " \t")
    s = core.create_seminar(ids, "", 10, "  ")
    assert w.name == "Unnamed Event"
    assert w.details.topic == "General"
    assert w.details.company == "Unknown"
    assert s.name == "Unnamed Event"
    assert s.details.speaker == "TBD"


def test_fields_are_trimmed_and_keep_case():
    ids = core.IdSequence()
    w = core.create_workshop(ids, "  PyData Day ", 5, " NumPy ", " ACME corp ")
    assert (w.name, w.details.topic, w.details.company) == ("PyData Day", "NumPy", "ACME corp")


@pytest.mark.parametrize("capacity", [-1, -100])
def test_negative_capacity_rejected(capacity):
    ids = core.IdSequence()
    with pytest.raises(core.CapacityError) as info:
        core.create_seminar(ids, "Talk", capacity, "Ann")
    assert str(info.value) == "Capacity cannot be negative."
    assert info.value.capacity == capacity
    assert ids.peek() == 1


def test_ids_increase_across_variants_and_failures():
    ids = core.IdSequence()
    a = core.create_workshop(ids, "A", 1, "t", "c")
    b = core.create_seminar(ids, "B", 2, "s")
    with pytest.raises(core.CapacityError):
        core.create_workshop(ids, "C", -5, "t", "c")
    d = core.create_seminar(ids, "D", 3, "s")
    assert [a.id, b.id, d.id] == [1, 2, 3]


def test_events_are_immutable():
    e = core.create_seminar(core.IdSequence(), "Talk", 1, "Ann")
    with pytest.raises(AttributeError):
        e.info.capacity = 10


def test_workshop_detail_lines():
    w = core.create_workshop(core.IdSequence(), "AI Day", 50, "ML", "Acme")
    assert w.detail() == [
        "Type     : Workshop",
        "Event ID : 1",
        "Name     : AI Day",
        "Topic    : ML",
        "Company  : Acme",
        "Capacity : 50",
    ]


def test_seminar_detail_lines():
    s = core.create_seminar(core.IdSequence(), "Intro", 30, "Dr. X")
    assert s.detail() == [
        "Type     : Seminar",
        "Event ID : 1",
        "Name     : Intro",
        "Speaker  : Dr. X",
        "Capacity : 30",
    ]


def test_non_verbose_detail_is_summary():
    s = core.create_seminar(core.IdSequence(), "Intro", 30, "Dr. X")
    assert s.detail(verbose=False) == [s.summary()]


def test_id_sequence_reset():
    ids = core.IdSequence()
    ids.next()
    ids.next()
    ids.reset()
    assert ids.peek() == 1
