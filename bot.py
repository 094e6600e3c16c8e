import os
import discord
from discord.ext import commands
from discord import app_commands
from discord import Embed
from typing import List

from storage import ProgressStore, StoreError
from workouts import canonical_plan, plan_for
from locales import LANGUAGES, ui_for
from helpers import (
    PROGRESS_FILE, current_week_id, today_day_index, load_progress, load_report,
    toggle_exercise, display_exercise, suggestion_for, day_percentage, make_bar,
    random_motivation, get_user_lang, set_user_lang, SnapshotCache,
)


TOKEN = os.getenv("DISCORD_TOKEN")

intents = discord.Intents.default()


class WorkoutBot(commands.Bot):
    def __init__(self, store: ProgressStore):
        super().__init__(
            command_prefix="!",
            intents=intents,
            help_command=None
        )
        self.store = store
        self.snapshots = SnapshotCache()

    async def setup_hook(self):
        await self.tree.sync()
        print(f"Synced {len(self.tree.get_commands())} command(s)")


bot = WorkoutBot(ProgressStore(PROGRESS_FILE))

DAY_CHOICES = [
    app_commands.Choice(name="Today", value=0),
    app_commands.Choice(name="Day 1", value=1),
    app_commands.Choice(name="Day 2", value=2),
    app_commands.Choice(name="Day 3", value=3),
    app_commands.Choice(name="Day 4", value=4),
    app_commands.Choice(name="Day 5", value=5),
]


def workout_embed(member, day: int, lang: str, progress: dict, week: str) -> Embed:
    t = ui_for(lang)
    shown = plan_for(lang)[day]
    finished = 0
    embed = Embed(
        title=f"🏋️ {t['day']} {day}: {shown.day_name}",
        description=f"{shown.focus}\n{t['week_id']} {week}",
        colour=0x6366f1
    )
    for canonical, ex in zip(canonical_plan()[day].exercises, shown.exercises):
        completed = bool(progress.get(canonical.name))
        finished += completed
        mark = "✅" if completed else "⬜"
        embed.add_field(
            name=f"{mark} {ex.name}",
            value=f"**{ex.sets}** · {ex.reps}\n💡 {ex.advice}",
            inline=False
        )
    embed.set_author(name=member.display_name)
    embed.set_footer(text=f"{finished}/{len(shown.exercises)} · {t['footer_note']}")
    return embed


def report_embed(member, report: dict, lang: str) -> Embed:
    t = ui_for(lang)
    embed = Embed(
        title=f"📊 {t['report_title']}: {member.display_name}",
        description=(
            f"{t['week_id']} {report['week_id']}\n"
            f"➡️ {t['completion']}: **{report['completion_percentage']}%**\n"
            f"{t['completed']}: **{report['completed_exercises']}** · "
            f"{t['total_exercises']}: **{report['total_exercises']}**"
        ),
        colour=0x3498db
    )

    days = report["daily_completion"]
    max_len = max(len(d["day_name"]) for d in days.values()) if days else 0
    lines = []
    for day, d in days.items():
        bar = make_bar(d["completed"], d["total"])
        pct = day_percentage(d["completed"], d["total"])
        lines.append(f"{d['day_name'].ljust(max_len)}  {bar}  {d['completed']}/{d['total']} ({pct}%)")
    embed.add_field(name=f"📋 {t['daily_breakdown']}", value="```" + "\n".join(lines) + "```", inline=False)
    embed.add_field(
        name=f"🎯 {t['suggestion_title']}",
        value=suggestion_for(report["suggestion_tier"], lang),
        inline=False
    )
    return embed


# -------- bot commands -------------
@bot.tree.command(name="workout", description="Show a day of the workout plan")
@app_commands.describe(day="Plan day (defaults to today)")
@app_commands.choices(day=DAY_CHOICES)
async def workout(interaction: discord.Interaction, day: int = 0):
    uid = str(interaction.user.id)
    lang = get_user_lang(uid)
    week = current_week_id()
    day = day or today_day_index()

    progress, error = load_progress(bot.store, uid, week)
    if error:
        print(f"Error loading progress for {uid}: {error}")
    else:
        bot.snapshots.remember(uid, week, progress)

    embed = workout_embed(interaction.user, day, lang, progress, week)
    if error:
        embed.add_field(name="⚠️", value=ui_for(lang)["progress_error"], inline=False)
    await interaction.response.send_message(embed=embed)


async def exercise_autocomplete(
    interaction: discord.Interaction,
    current: str,
) -> List[app_commands.Choice[str]]:
    lang = get_user_lang(str(interaction.user.id))
    day = getattr(interaction.namespace, "day", None) or today_day_index()
    choices = []
    for canonical, ex in zip(canonical_plan()[day].exercises, plan_for(lang)[day].exercises):
        if current.lower() in ex.name.lower():
            choices.append(app_commands.Choice(name=ex.name, value=canonical.name))
    return choices[:25]  # Discord limit


@bot.tree.command(name="done", description="Mark an exercise done (or undo it)")
@app_commands.describe(exercise="Exercise to toggle", day="Plan day (defaults to today)")
@app_commands.autocomplete(exercise=exercise_autocomplete)
@app_commands.choices(day=DAY_CHOICES)
async def done(interaction: discord.Interaction, exercise: str, day: int = 0):
    uid = str(interaction.user.id)
    lang = get_user_lang(uid)
    t = ui_for(lang)
    week = current_week_id()
    day = day or today_day_index()

    shown = display_exercise(day, exercise, lang)
    if shown is None:
        return await interaction.response.send_message(f"🚫 {t['unknown_exercise']}", ephemeral=True)

    # toggle against what this member last saw, not a fresh read
    snapshot, error = bot.snapshots.ensure(bot.store, uid, week)
    if error:
        print(f"Error loading progress for {uid}: {error}")
        return await interaction.response.send_message(f"❌ {t['progress_unavailable']}", ephemeral=True)
    current = bool(snapshot.get(exercise))

    try:
        new_status = toggle_exercise(bot.store, uid, week, exercise, current)
    except StoreError as e:
        print(f"Error updating progress for {uid}: {e}")
        return await interaction.response.send_message(f"❌ {t['save_error']}", ephemeral=True)
    snapshot[exercise] = new_status

    if new_status:
        embed = Embed(
            title=f"✅ {random_motivation(lang)}",
            description=f"**{shown.name}** {t['marked_done']}",
            colour=0x2ecc71
        )
    else:
        embed = Embed(
            title="↩️",
            description=f"**{shown.name}** {t['marked_undone']}",
            colour=0xe67e22
        )
    embed.set_footer(text=f"{t['week_id']} {week} · {t['day']} {day}")
    await interaction.response.send_message(embed=embed)


@bot.tree.command(name="report", description="Weekly completion report")
@app_commands.describe(member="View another member's report (optional)")
async def report(interaction: discord.Interaction, member: discord.Member = None):
    await interaction.response.defer()

    target = member or interaction.user
    uid = str(target.id)
    lang = get_user_lang(str(interaction.user.id))
    week = current_week_id()

    data, error = load_report(bot.store, uid, week, lang)
    embed = report_embed(target, data, lang)
    if error:
        print(f"Error generating report for {uid}: {error}")
        embed.add_field(name="⚠️", value=ui_for(lang)["report_error"], inline=False)
    await interaction.followup.send(embed=embed)


@bot.tree.command(name="language", description="Switch display language")
@app_commands.choices(lang=[
    app_commands.Choice(name=label, value=code) for code, label in LANGUAGES.items()
])
async def language(interaction: discord.Interaction, lang: str):
    set_user_lang(str(interaction.user.id), lang)
    await interaction.response.send_message(ui_for(lang)["language_set"], ephemeral=True)


@bot.tree.command(name="userid", description="Show the id your progress is stored under")
async def userid(interaction: discord.Interaction):
    t = ui_for(get_user_lang(str(interaction.user.id)))
    await interaction.response.send_message(f"{t['your_user_id']}: `{interaction.user.id}`", ephemeral=True)


@bot.tree.command(name="help", description="Show all available commands")
async def help_slash(interaction: discord.Interaction):
    embed = Embed(
        title="📋 WorkoutBot Commands",
        colour=0x95a5a6
    )
    embed.add_field(
        name="🔹 `/workout`",
        value="Show today's exercises, or another plan day.\n• day: Choose from dropdown (optional)",
        inline=False
    )
    embed.add_field(
        name="🔹 `/done`",
        value=(
            "Mark an exercise done for this week, or undo it.\n"
            "• exercise: Start typing to see the day's exercises\n"
            "• day: Choose from dropdown (optional)"
        ),
        inline=False
    )
    embed.add_field(
        name="🔹 `/report`",
        value="Weekly completion report with a suggestion for next week.\n• member: Select a member (optional)",
        inline=False
    )
    embed.add_field(name="🔹 `/language`", value="Switch between English and French.", inline=False)
    embed.add_field(name="🔹 `/userid`", value="Show the id your progress is stored under.", inline=False)
    embed.add_field(name="🔹 `/ping`", value="Check if the bot is responsive.", inline=False)
    await interaction.response.send_message(embed=embed)


# simple ping-pong sanity check
@bot.tree.command(name="ping", description="Check bot responsiveness")
async def ping(interaction: discord.Interaction):
    await interaction.response.send_message("pong!")


@bot.event
async def on_ready():
    print(f"Logged in as {bot.user}")
    print(f"Slash commands synced: {len(bot.tree.get_commands())}")


if __name__ == "__main__":
    if not TOKEN:
        raise SystemExit("DISCORD_TOKEN not found in environment variables")
    print("Loaded token is:", TOKEN[:10] + "...")
    bot.run(TOKEN)
