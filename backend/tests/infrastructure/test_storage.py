"""Storage facade — admin seeding, notification read flag, dashboard aggregate."""

from pmis.infrastructure.storage import build_memory_storage


async def test_fresh_storage_is_empty():
    storage = build_memory_storage()
    assert await storage.users.count() == 0
    assert await storage.projects.list() == []
    assert await storage.health_check() is True


async def test_seed_default_admin(storage, settings):
    admin = await storage.get_user_by_username("admin")
    assert admin.id == 1
    assert admin.role == "admin"
    assert admin.email == "admin@pmis.com"
    assert admin.full_name == "John Smith"


async def test_seed_default_admin_is_idempotent(storage, settings):
    again = await storage.seed_default_admin(settings)
    assert again.id == 1
    assert await storage.users.count() == 1


async def test_get_user_by_username_missing(storage):
    assert await storage.get_user_by_username("nobody") is None


async def test_mark_notification_read(storage):
    note = await storage.notifications.create(
        {"user_id": 1, "title": "Hi", "message": "Welcome"},
    )
    assert note.read is False
    assert await storage.mark_notification_read(note.id) is True
    assert (await storage.notifications.get(note.id)).read is True
    assert await storage.mark_notification_read(999) is False


async def test_dashboard_stats(storage):
    await storage.projects.create(
        {"name": "A", "status": "in-progress", "budget": "2000000", "progress": 50},
    )
    await storage.projects.create(
        {"name": "B", "status": "completed", "budget": "1000000", "progress": 100},
    )
    stats = await storage.dashboard_stats()
    assert stats == {
        "active_projects": 1,
        "total_budget": "$3.0M",
        "completion_rate": 75,
        "team_members": 1,
    }


async def test_notifications_filter_by_user(storage):
    await storage.notifications.create({"user_id": 1, "title": "a", "message": "m"})
    await storage.notifications.create({"user_id": 2, "title": "b", "message": "m"})
    mine = await storage.notifications.list(user_id=1)
    assert [n.title for n in mine] == ["a"]
