# helpers.py
import math
import os
import random
from collections.abc import Mapping
from datetime import datetime, date
from zoneinfo import ZoneInfo

from dotenv import load_dotenv

from storage import StoreError, load_meta, save_meta
from workouts import canonical_plan, exercise_names, plan_for
from locales import DEFAULT_LANG, LANGUAGES, MOTIVATION_MESSAGES, SUGGESTIONS

load_dotenv()

# timezone definition
LOCAL_TZ = ZoneInfo(os.getenv("WORKOUT_TZ", "Australia/Adelaide"))

PROGRESS_FILE = os.getenv("PROGRESS_FILE", "data/progress.json")
# per-user settings (display language)
META_FILE = os.getenv("META_FILE", "meta.json")

# (threshold, tier), highest first; thresholds are inclusive except for goodStart
SUGGESTION_TIERS = [
    (100, "perfect"),
    (80, "excellent"),
    (50, "greatWork"),
]


# — week helpers —
def week_id(d: date) -> str:
    """
    Week key used to partition progress, e.g. "2024-W1".
    Not ISO weeks: week 1 is the (Sunday-started) week holding Jan 1.
    Stored keys depend on this exact formula.
    """
    first_day = date(d.year, 1, 1)
    past_days = (d - first_day).days
    first_weekday = (first_day.weekday() + 1) % 7  # 0 = Sunday
    week = math.ceil((past_days + first_weekday + 1) / 7)
    return f"{d.year}-W{week}"


def current_week_id():
    return week_id(datetime.now(LOCAL_TZ).date())


def today_day_index(d: date = None) -> int:
    """Plan day for a calendar date: Mon..Fri -> 1..5, weekends fall back to day 1."""
    d = d or datetime.now(LOCAL_TZ).date()
    wd = d.weekday()
    return wd + 1 if wd < 5 else 1


# — report —
def round_half_up(x: float) -> int:
    return int(math.floor(x + 0.5)) if x >= 0 else -int(math.floor(-x + 0.5))


def suggestion_tier(pct: int) -> str:
    for threshold, tier in SUGGESTION_TIERS:
        if pct >= threshold:
            return tier
    return "goodStart" if pct > 0 else "start"


def suggestion_for(tier: str, lang: str) -> str:
    return SUGGESTIONS.get(lang, SUGGESTIONS[DEFAULT_LANG])[tier]


def day_percentage(done: int, total: int) -> int:
    return round_half_up(done / total * 100) if total else 0


def build_report(plan, progress: dict, week_key: str, display_plan=None) -> dict:
    """
    Aggregate one week of completion flags against the plan.

    `plan` supplies the storage keys (canonical names), `display_plan` only the
    day names shown in the breakdown. Missing flags count as not completed.
    """
    display_plan = display_plan or plan
    total_exercises = 0
    completed_exercises = 0
    daily_completion = {}

    for day in sorted(plan):
        exercises = plan[day].exercises
        completed_today = sum(1 for ex in exercises if progress.get(ex.name))
        total_exercises += len(exercises)
        completed_exercises += completed_today
        shown = display_plan.get(day, plan[day])
        daily_completion[day] = {
            "total": len(exercises),
            "completed": completed_today,
            "day_name": shown.day_name,
        }

    pct = day_percentage(completed_exercises, total_exercises)
    return {
        "week_id": week_key,
        "total_exercises": total_exercises,
        "completed_exercises": completed_exercises,
        "completion_percentage": pct,
        "daily_completion": daily_completion,
        "suggestion_tier": suggestion_tier(pct),
    }


# — store boundary —
def clean_progress(raw, known_names) -> dict:
    """Keep only known exercise names and coerce flags to bool."""
    if not isinstance(raw, Mapping):
        return {}
    return {name: bool(val) for name, val in raw.items() if name in known_names}


def load_progress(store, user_id: str, week_key: str):
    """
    Read and sanitise one progress document.
    Returns (progress, error); on a failed read progress is empty and error is the StoreError.
    """
    try:
        raw = store.read(user_id, week_key)
    except StoreError as e:
        return {}, e
    return clean_progress(raw, exercise_names(canonical_plan())), None


def load_report(store, user_id: str, week_key: str, lang: str = DEFAULT_LANG):
    progress, error = load_progress(store, user_id, week_key)
    report = build_report(canonical_plan(), progress, week_key, plan_for(lang))
    return report, error


def toggle_exercise(store, user_id: str, week_key: str, name: str, current_status: bool) -> bool:
    """
    Flip one flag from the last displayed state (no fresh read) and merge it
    into the week's document. Concurrent toggles: last write wins.
    """
    if name not in exercise_names(canonical_plan()):
        raise ValueError(f"Unknown exercise: {name}")
    new_status = not current_status
    store.write(user_id, week_key, {name: new_status})
    return new_status


class SnapshotCache:
    """Last progress shown to each member. Only the newest week is kept."""

    def __init__(self):
        self.entries = {}

    def remember(self, user_id: str, week_key: str, progress: dict):
        for key in [k for k in self.entries if k[1] != week_key]:
            del self.entries[key]
        self.entries[(user_id, week_key)] = dict(progress)

    def get(self, user_id: str, week_key: str):
        return self.entries.get((user_id, week_key))

    def ensure(self, store, user_id: str, week_key: str):
        """
        Cached snapshot, read from the store on a miss.
        Returns (snapshot, error); a failed read is not cached and gives (None, error).
        """
        snapshot = self.get(user_id, week_key)
        if snapshot is not None:
            return snapshot, None
        progress, error = load_progress(store, user_id, week_key)
        if error:
            return None, error
        self.remember(user_id, week_key, progress)
        return self.get(user_id, week_key), None


def display_exercise(day: int, name: str, lang: str):
    """Localised exercise for a canonical name, matched by position in the day."""
    canonical = canonical_plan()[day].exercises
    for i, ex in enumerate(canonical):
        if ex.name == name:
            return plan_for(lang)[day].exercises[i]
    return None


def random_motivation(lang: str) -> str:
    return random.choice(MOTIVATION_MESSAGES.get(lang, MOTIVATION_MESSAGES[DEFAULT_LANG]))


def make_bar(done, targ, length=14):
    if targ <= 0:
        return "░" * length
    filled = round(done / targ * length)
    filled = max(0, min(length, filled))
    return "█" * filled + "░" * (length - filled)


# — language preference —
def get_user_lang(user_id: str, meta_file=None) -> str:
    meta = load_meta(meta_file or META_FILE)
    return meta.get("languages", {}).get(str(user_id), DEFAULT_LANG)


def set_user_lang(user_id: str, lang: str, meta_file=None):
    if lang not in LANGUAGES:
        raise ValueError(f"Unsupported language: {lang}")
    meta_file = meta_file or META_FILE
    meta = load_meta(meta_file)
    meta.setdefault("languages", {})[str(user_id)] = lang
    save_meta(meta_file, meta)
