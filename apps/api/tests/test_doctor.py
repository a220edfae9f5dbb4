from __future__ import annotations

from datetime import datetime

from kinpath.doctor import DoctorDiscussionItem, group_doctor_items

CREATED = datetime(2025, 5, 1, 9, 0)


def make_item(item_id: str, **fields) -> DoctorDiscussionItem:
    fields.setdefault("updated_at", CREATED)
    return DoctorDiscussionItem(id=item_id, user_id="user-1", title=item_id, created_at=CREATED, **fields)


def test_open_items_sorted_by_priority() -> None:
    items = [
        make_item("low", priority="low"),
        make_item("normal-1"),
        make_item("high", priority="high"),
        make_item("normal-2"),
    ]
    groups = group_doctor_items(items)
    assert [i.id for i in groups.to_discuss] == ["high", "normal-1", "normal-2", "low"]
    assert groups.discussed == []


def test_discussed_items_most_recent_first() -> None:
    items = [
        make_item("old", is_discussed=True, discussed_at=datetime(2025, 5, 2)),
        make_item("fallback", is_discussed=True, updated_at=datetime(2025, 5, 5)),
        make_item("new", is_discussed=True, discussed_at=datetime(2025, 5, 10)),
    ]
    groups = group_doctor_items(items)
    assert [i.id for i in groups.discussed] == ["new", "fallback", "old"]
    assert groups.to_discuss == []
