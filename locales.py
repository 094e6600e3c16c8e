# locales.py

LANGUAGES = {"en": "🇺🇸 English", "fr": "🇫🇷 Français"}
DEFAULT_LANG = "en"

UI = {
    "en": {
        "app_name": "Bou G",
        "workout": "Workout",
        "report": "Report",
        "day": "Day",
        "week_id": "Week",
        "report_title": "Weekly Report",
        "completion": "Completion",
        "completed": "Completed",
        "total_exercises": "Total Exercises",
        "daily_breakdown": "Daily Breakdown",
        "suggestion_title": "Suggestion for Next Week",
        "your_user_id": "Your User ID",
        "footer_note": "Workout plan customized for your goals. Stay consistent!",
        "report_error": "Could not load your weekly report. Please try again later.",
        "progress_error": "Could not load your progress. Showing an empty week.",
        "progress_unavailable": "Could not load your progress. Please try again later.",
        "save_error": "Could not save your progress. Please try again later.",
        "unknown_exercise": "Unknown exercise for that day.",
        "marked_done": "marked as done",
        "marked_undone": "marked as not done",
        "language_set": "Language set to English.",
    },
    "fr": {
        "app_name": "Bou G",
        "workout": "Entraînement",
        "report": "Rapport",
        "day": "Jour",
        "week_id": "Semaine",
        "report_title": "Rapport Hebdomadaire",
        "completion": "Complétion",
        "completed": "Terminés",
        "total_exercises": "Total d'exercices",
        "daily_breakdown": "Répartition quotidienne",
        "suggestion_title": "Suggestion pour la semaine prochaine",
        "your_user_id": "Votre ID utilisateur",
        "footer_note": "Plan d'entraînement personnalisé pour vos objectifs. Restez constant!",
        "report_error": "Impossible de charger votre rapport hebdomadaire. Veuillez réessayer plus tard.",
        "progress_error": "Impossible de charger votre progression. Semaine vide affichée.",
        "progress_unavailable": "Impossible de charger votre progression. Veuillez réessayer plus tard.",
        "save_error": "Impossible d'enregistrer votre progression. Veuillez réessayer plus tard.",
        "unknown_exercise": "Exercice inconnu pour ce jour.",
        "marked_done": "marqué comme terminé",
        "marked_undone": "marqué comme non terminé",
        "language_set": "Langue réglée sur le français.",
    },
}

MOTIVATION_MESSAGES = {
    "en": ["Awesome work!", "You've got this!", "Keep pushing!", "One step closer!", "Nailed it!", "Feeling strong!"],
    "fr": ["Super travail!", "Tu es capable!", "Continue comme ça!", "Un pas de plus!", "Réussi!", "En pleine forme!"],
}

# keyed by suggestion tier
SUGGESTIONS = {
    "en": {
        "start": "Let's get started this week!",
        "goodStart": "Good start! Aim for consistency on all workout days.",
        "greatWork": "Great work! You're building a strong habit. Push for a few more exercises next week.",
        "excellent": "Excellent consistency! You're very close to a perfect week. Keep up the momentum!",
        "perfect": "Perfect week! You've crushed your goals. Consider increasing weights or reps next week.",
    },
    "fr": {
        "start": "Commençons cette semaine!",
        "goodStart": "Bon début! Essayez d'être constant tous les jours d'entraînement.",
        "greatWork": "Excellent travail! Vous créez une bonne habitude. Essayez quelques exercices de plus la semaine prochaine.",
        "excellent": "Excellente constance! Vous êtes très près d'une semaine parfaite. Gardez cet élan!",
        "perfect": "Semaine parfaite! Vous avez pulvérisé vos objectifs. Envisagez d'augmenter les poids ou les répétitions la semaine prochaine.",
    },
}


def ui_for(lang: str) -> dict:
    return UI.get(lang, UI[DEFAULT_LANG])
