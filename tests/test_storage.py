"""Tests for the JSON progress store, boundary sanitation and the toggle/report flow."""

import json

import pytest

from helpers import (
    SnapshotCache,
    clean_progress,
    get_user_lang,
    load_progress,
    load_report,
    set_user_lang,
    toggle_exercise,
)
from storage import ProgressStore, StoreError, load_meta
from workouts import canonical_plan, exercise_names

WEEK = "2024-W1"
BENCH = "Barbell Bench Press"
SQUAT = "Barbell Squats"


@pytest.fixture
def store(tmp_path):
    return ProgressStore(tmp_path / "data" / "progress.json")


class BrokenStore:
    def read(self, user_id, week_id):
        raise StoreError("backend unavailable")

    def write(self, user_id, week_id, partial):
        raise StoreError("backend unavailable")


class TestProgressStore:
    def test_missing_document_reads_as_none(self, store):
        assert store.read("42", WEEK) is None

    def test_write_creates_file(self, store):
        store.write("42", WEEK, {BENCH: True})
        assert store.read("42", WEEK) == {BENCH: True}
        assert store.path.exists()

    def test_write_merges_instead_of_replacing(self, store):
        store.write("42", WEEK, {BENCH: True})
        store.write("42", WEEK, {SQUAT: True})
        store.write("42", WEEK, {BENCH: False})
        assert store.read("42", WEEK) == {BENCH: False, SQUAT: True}

    def test_documents_are_scoped_by_user_and_week(self, store):
        store.write("42", WEEK, {BENCH: True})
        store.write("7", WEEK, {SQUAT: True})
        store.write("42", "2024-W2", {SQUAT: True})
        assert store.read("42", WEEK) == {BENCH: True}
        assert store.read("7", WEEK) == {SQUAT: True}
        assert store.read("42", "2024-W2") == {SQUAT: True}

    def test_on_disk_layout(self, store):
        store.write(42, WEEK, {BENCH: True})
        assert json.loads(store.path.read_text(encoding="utf-8")) == {WEEK: {"42": {BENCH: True}}}

    def test_read_returns_a_copy(self, store):
        store.write("42", WEEK, {BENCH: True})
        doc = store.read("42", WEEK)
        doc[SQUAT] = True
        assert store.read("42", WEEK) == {BENCH: True}

    def test_corrupt_file_raises_store_error(self, store):
        store.path.parent.mkdir(parents=True)
        store.path.write_text("{not json", encoding="utf-8")
        with pytest.raises(StoreError):
            store.read("42", WEEK)

    @pytest.mark.parametrize("content", [
        [],
        {WEEK: []},
        {WEEK: {"42": [BENCH]}},
        {WEEK: {"42": 5}},
    ])
    def test_wrong_shape_raises_store_error(self, store, content):
        store.path.parent.mkdir(parents=True)
        store.path.write_text(json.dumps(content), encoding="utf-8")
        with pytest.raises(StoreError):
            store.read("42", WEEK)
        with pytest.raises(StoreError):
            store.write("42", WEEK, {SQUAT: True})
        report, error = load_report(store, "42", WEEK)
        assert isinstance(error, StoreError)
        assert report["completed_exercises"] == 0
        assert report["suggestion_tier"] == "start"

    def test_other_users_shape_does_not_matter(self, store):
        store.path.parent.mkdir(parents=True)
        store.path.write_text(json.dumps({WEEK: {"7": 5}, "2024-W2": []}), encoding="utf-8")
        assert store.read("42", WEEK) is None

    def test_unwritable_path_raises_store_error(self, tmp_path):
        blocker = tmp_path / "blocker"
        blocker.write_text("", encoding="utf-8")
        store = ProgressStore(blocker / "progress.json")
        with pytest.raises(StoreError):
            store.write("42", WEEK, {BENCH: True})


class TestCleanProgress:
    def test_unknown_keys_are_dropped(self):
        names = exercise_names(canonical_plan())
        assert clean_progress({BENCH: True, "Jumping Jacks": True}, names) == {BENCH: True}

    def test_values_are_coerced_to_bool(self):
        names = exercise_names(canonical_plan())
        assert clean_progress({BENCH: 1, SQUAT: ""}, names) == {BENCH: True, SQUAT: False}

    def test_none_reads_as_empty(self):
        assert clean_progress(None, {BENCH}) == {}

    @pytest.mark.parametrize("raw", [[BENCH], 5, "Barbell Bench Press"])
    def test_non_mapping_reads_as_empty(self, raw):
        assert clean_progress(raw, {BENCH}) == {}


class TestToggle:
    def test_toggle_sets_negation_of_displayed_state(self, store):
        assert toggle_exercise(store, "42", WEEK, BENCH, False) is True
        assert store.read("42", WEEK) == {BENCH: True}
        assert toggle_exercise(store, "42", WEEK, BENCH, True) is False
        assert store.read("42", WEEK) == {BENCH: False}

    def test_toggle_preserves_other_exercises(self, store):
        store.write("42", WEEK, {SQUAT: True})
        toggle_exercise(store, "42", WEEK, BENCH, False)
        assert store.read("42", WEEK) == {SQUAT: True, BENCH: True}

    def test_unknown_exercise_is_rejected_before_writing(self, store):
        with pytest.raises(ValueError):
            toggle_exercise(store, "42", WEEK, "Jumping Jacks", False)
        assert store.read("42", WEEK) is None

    def test_localised_name_is_rejected(self, store):
        with pytest.raises(ValueError):
            toggle_exercise(store, "42", WEEK, "Développé couché à la barre", False)

    def test_stale_snapshots_last_write_wins(self, store):
        store.write("42", WEEK, {BENCH: True, SQUAT: True})
        # session A saw the current state, session B an older one
        toggle_exercise(store, "42", WEEK, BENCH, True)
        toggle_exercise(store, "42", WEEK, BENCH, False)
        assert store.read("42", WEEK) == {BENCH: True, SQUAT: True}

    def test_store_failure_propagates(self):
        with pytest.raises(StoreError):
            toggle_exercise(BrokenStore(), "42", WEEK, BENCH, False)


class TestReportFlow:
    def test_report_from_stored_progress(self, store):
        for ex in canonical_plan()[1].exercises:
            store.write("42", WEEK, {ex.name: True})
        report, error = load_report(store, "42", WEEK)
        assert error is None
        assert report["completed_exercises"] == 6
        assert report["completion_percentage"] == 22

    def test_missing_document_is_a_zero_report_without_error(self, store):
        report, error = load_report(store, "42", WEEK)
        assert error is None
        assert report["completed_exercises"] == 0
        assert report["suggestion_tier"] == "start"

    def test_read_failure_degrades_to_zero_report(self):
        report, error = load_report(BrokenStore(), "42", WEEK)
        assert isinstance(error, StoreError)
        assert report["total_exercises"] == 27
        assert report["completed_exercises"] == 0
        assert report["suggestion_tier"] == "start"

    def test_unknown_stored_keys_are_ignored(self, store):
        store.write("42", WEEK, {"Jumping Jacks": True, BENCH: True})
        progress, error = load_progress(store, "42", WEEK)
        assert error is None
        assert progress == {BENCH: True}

    def test_report_uses_display_language_for_day_names(self, store):
        report, _ = load_report(store, "42", WEEK, "fr")
        assert report["daily_completion"][1]["day_name"] == "Haut du corps (Poussée) & HIIT"


class TestUserLanguage:
    def test_default_language(self, tmp_path):
        assert get_user_lang("42", tmp_path / "meta.json") == "en"

    def test_language_is_persisted_per_user(self, tmp_path):
        meta = tmp_path / "meta.json"
        set_user_lang("42", "fr", meta)
        assert get_user_lang("42", meta) == "fr"
        assert get_user_lang("7", meta) == "en"

    def test_unsupported_language(self, tmp_path):
        with pytest.raises(ValueError):
            set_user_lang("42", "de", tmp_path / "meta.json")

    def test_corrupt_meta_file_falls_back_to_default(self, tmp_path):
        meta = tmp_path / "meta.json"
        meta.write_text("{not json", encoding="utf-8")
        assert load_meta(meta) == {}
        assert get_user_lang("42", meta) == "en"

    def test_non_object_meta_file(self, tmp_path):
        meta = tmp_path / "meta.json"
        meta.write_text("[]", encoding="utf-8")
        assert get_user_lang("42", meta) == "en"
        set_user_lang("42", "fr", meta)
        assert get_user_lang("42", meta) == "fr"


class FlakyStore(ProgressStore):
    """Store whose reads fail until `broken` is cleared."""

    broken = True

    def read(self, user_id, week_id):
        if self.broken:
            raise StoreError("backend unavailable")
        return super().read(user_id, week_id)


class TestSnapshotCache:
    def test_failed_read_is_not_cached(self, tmp_path):
        store = FlakyStore(tmp_path / "progress.json")
        store.write("42", WEEK, {BENCH: True})
        cache = SnapshotCache()

        snapshot, error = cache.ensure(store, "42", WEEK)
        assert snapshot is None
        assert isinstance(error, StoreError)
        assert cache.get("42", WEEK) is None

        store.broken = False
        snapshot, error = cache.ensure(store, "42", WEEK)
        assert error is None
        assert snapshot == {BENCH: True}
        # undoing an exercise stored as done writes False
        assert toggle_exercise(store, "42", WEEK, BENCH, snapshot.get(BENCH, False)) is False
        assert store.read("42", WEEK) == {BENCH: False}

    def test_cached_snapshot_is_served_without_reading(self, store):
        cache = SnapshotCache()
        cache.remember("42", WEEK, {BENCH: True})
        snapshot, error = cache.ensure(BrokenStore(), "42", WEEK)
        assert error is None
        assert snapshot == {BENCH: True}

    def test_ensure_returns_the_cached_dict(self, store):
        cache = SnapshotCache()
        snapshot, _ = cache.ensure(store, "42", WEEK)
        snapshot[BENCH] = True
        assert cache.get("42", WEEK) == {BENCH: True}

    def test_remember_drops_earlier_weeks(self):
        cache = SnapshotCache()
        cache.remember("42", "2024-W1", {BENCH: True})
        cache.remember("7", "2024-W1", {SQUAT: True})
        cache.remember("42", "2024-W2", {})
        assert cache.get("42", "2024-W1") is None
        assert cache.get("7", "2024-W1") is None
        assert cache.get("42", "2024-W2") == {}
        assert len(cache.entries) == 1

    def test_remember_keeps_other_members_of_same_week(self):
        cache = SnapshotCache()
        cache.remember("42", WEEK, {BENCH: True})
        cache.remember("7", WEEK, {})
        assert cache.get("42", WEEK) == {BENCH: True}
