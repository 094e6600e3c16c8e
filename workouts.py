# workouts.py
# Fixed five-day plan. English is the canonical catalog: its exercise names
# are the storage keys, whatever language is displayed.
from typing import Dict, NamedTuple, Tuple


class Exercise(NamedTuple):
    name: str
    sets: str
    reps: str
    advice: str
    prompt: str = ""


class DayPlan(NamedTuple):
    day_index: int
    day_name: str
    focus: str
    exercises: Tuple[Exercise, ...]


CANONICAL_LANG = "en"

WORKOUT_PLANS: Dict[str, Dict[int, DayPlan]] = {
    "en": {
        1: DayPlan(1, "Upper Body Push & HIIT", "Chest, Shoulders, Triceps", (
            Exercise("Barbell Bench Press", "4 sets", "6-8 reps",
                     "Keep your back flat on the bench and feet firmly on the ground for stability.",
                     "A clear, detailed, anatomically correct visual illustration of a man performing a barbell bench press, showing proper form. Fitness diagram style, white background."),
            Exercise("Incline Dumbbell Press", "3 sets", "8-12 reps",
                     "Focus on squeezing your chest at the top of the movement. Don't lock out your elbows.",
                     "A clear, detailed, anatomically correct visual illustration of a man performing an incline dumbbell press on a bench. Fitness diagram style, white background."),
            Exercise("Overhead Press", "4 sets", "6-8 reps",
                     "Engage your core to protect your lower back. Press the bar straight up.",
                     "A clear, detailed, anatomically correct visual illustration of a man performing a standing barbell overhead press. Fitness diagram style, white background."),
            Exercise("Lateral Raises", "3 sets", "12-15 reps",
                     "Avoid using momentum. Lift the weights with a controlled motion, leading with your elbows.",
                     "A clear, detailed, anatomically correct visual illustration of a man performing dumbbell lateral raises. Fitness diagram style, white background."),
            Exercise("Tricep Pushdowns", "3 sets", "10-15 reps",
                     "Keep your elbows tucked into your sides throughout the entire movement.",
                     "A clear, detailed, anatomically correct visual illustration of a man performing a tricep pushdown with a cable machine. Fitness diagram style, white background."),
            Exercise("HIIT: Treadmill Sprints", "10 rounds", "30s sprint, 60s walk",
                     "Push your hardest during the sprints, and use the walk to recover your breath.",
                     "Dynamic action shot of a fit man sprinting at high speed on a treadmill. Fitness illustration style, sense of motion."),
        )),
        2: DayPlan(2, "Upper Body Pull & LISS", "Back, Biceps", (
            Exercise("Barbell Rows", "4 sets", "6-8 reps",
                     "Maintain a flat back and pull the bar towards your lower chest. Squeeze your shoulder blades together.",
                     "A clear, detailed, anatomically correct visual illustration of a man performing a bent-over barbell row. Fitness diagram style, white background."),
            Exercise("Lat Pulldowns", "4 sets", "8-12 reps",
                     "Lead with your elbows and pull the bar down to your upper chest. Focus on using your back muscles.",
                     "A clear, detailed, anatomically correct visual illustration of a man performing a lat pulldown on a cable machine. Fitness diagram style, white background."),
            Exercise("Seated Cable Rows", "3 sets", "10-12 reps",
                     "Keep your torso upright and pull the handle to your stomach. Avoid leaning back too much.",
                     "A clear, detailed, anatomically correct visual illustration of a man performing a seated cable row. Fitness diagram style, white background."),
            Exercise("Face Pulls", "3 sets", "15-20 reps",
                     "Pull the rope towards your face, aiming to get your hands by your ears. Great for shoulder health.",
                     "A clear, detailed, anatomically correct visual illustration of a man performing a face pull with a rope on a cable machine. Fitness diagram style, white background."),
            Exercise("Dumbbell Bicep Curls", "3 sets", "10-15 reps",
                     "Keep your elbows stationary at your sides. Avoid swinging the weights.",
                     "A clear, detailed, anatomically correct visual illustration of a man performing standing dumbbell bicep curls. Fitness diagram style, white background."),
            Exercise("LISS: Incline Walk", "1 session", "30 mins, steady pace",
                     "Maintain a consistent pace at a challenging incline to keep your heart rate elevated.",
                     "Illustration of a man walking at a steady pace on an inclined treadmill. Fitness style."),
        )),
        3: DayPlan(3, "Leg Day", "Quads, Hamstrings, Glutes", (
            Exercise("Barbell Squats", "4 sets", "6-8 reps",
                     "Keep your chest up and back straight. Go down until your thighs are at least parallel to the floor.",
                     "A clear, detailed, anatomically correct visual illustration of a man performing a barbell back squat. Fitness diagram style, white background."),
            Exercise("Romanian Deadlifts", "3 sets", "8-12 reps",
                     "Hinge at your hips, keeping your legs almost straight (slight bend). Feel the stretch in your hamstrings.",
                     "A clear, detailed, anatomically correct visual illustration of a man performing a Romanian deadlift with a barbell. Fitness diagram style, white background."),
            Exercise("Leg Press", "3 sets", "10-15 reps",
                     "Don't let your lower back round off the pad. Control the weight on the way down.",
                     "A clear, detailed, anatomically correct visual illustration of a man using a leg press machine. Fitness diagram style, white background."),
            Exercise("Leg Curls", "3 sets", "12-15 reps",
                     "Focus on squeezing your hamstrings to curl the weight. Avoid using your lower back.",
                     "A clear, detailed, anatomically correct visual illustration of a man using a lying leg curl machine. Fitness diagram style, white background."),
            Exercise("Calf Raises", "4 sets", "15-20 reps",
                     "Get a full stretch at the bottom and a powerful squeeze at the top of the movement.",
                     "A clear, detailed, anatomically correct visual illustration of a man performing standing calf raises. Fitness diagram style, white background."),
            Exercise("Treadmill Cool-down", "1 session", "15 mins, light jog",
                     "Gradually lower your heart rate. This helps with recovery.",
                     "Illustration of a man doing a light jog on a treadmill for a cool-down. Relaxed fitness style."),
        )),
        4: DayPlan(4, "Full Body & Core", "Strength & Stability", (
            Exercise("Dumbbell Goblet Squats", "3 sets", "8-10 reps",
                     "Hold one dumbbell vertically against your chest. Keep your torso upright as you squat.",
                     "A clear, detailed, anatomically correct visual illustration of a man performing a dumbbell goblet squat. Fitness diagram style, white background."),
            Exercise("Dumbbell Bench Press", "3 sets", "8-10 reps",
                     "Provides more stability challenge than a barbell. Control the dumbbells through the full range of motion.",
                     "A clear, detailed, anatomically correct visual illustration of a man performing a flat dumbbell bench press. Fitness diagram style, white background."),
            Exercise("One-Arm Dumbbell Rows", "3 sets", "8-10 reps / arm",
                     "Support yourself with one hand on a bench. Pull the dumbbell up towards your hip, not your chest.",
                     "A clear, detailed, anatomically correct visual illustration of a man performing a one-arm dumbbell row. Fitness diagram style, white background."),
            Exercise("Arnold Press", "3 sets", "10-12 reps",
                     "This exercise involves rotation, so use a lighter weight to master the form first.",
                     "A clear, detailed, anatomically correct visual illustration showing the sequence of an Arnold press with dumbbells. Fitness diagram style, white background."),
            Exercise("Plank", "3 sets", "Hold to failure",
                     "Keep a straight line from your head to your heels. Don't let your hips sag.",
                     "A clear, detailed, anatomically correct visual illustration of a man holding a proper plank position. Fitness diagram style, white background."),
            Exercise("Treadmill Run", "1 session", "15 mins, moderate pace",
                     "Find a pace you can maintain for the full 15 minutes to build cardiovascular endurance.",
                     "Illustration of a man running at a steady, moderate pace on a treadmill. Fitness style."),
        )),
        5: DayPlan(5, "Active Recovery & Cardio", "Endurance & Flexibility", (
            Exercise("LISS Cardio: Treadmill Walk", "1 session", "45 mins, brisk walk",
                     "Keep your heart rate in a steady, low-intensity zone. This is great for burning fat and recovery.",
                     "Illustration of a man doing a brisk walk on a treadmill for a long-duration cardio session. Fitness style."),
            Exercise("Foam Rolling", "1 session", "10-15 mins",
                     "Slowly roll over tight muscle groups to release tension and improve flexibility.",
                     "A clear illustration of a person using a foam roller on their leg muscles. Relaxed fitness diagram style, white background."),
            Exercise("Stretching", "1 session", "10-15 mins",
                     "Hold each stretch for 20-30 seconds. Focus on major muscle groups worked during the week.",
                     "A clear illustration of a person doing a full-body stretching routine, holding a hamstring stretch. Fitness diagram style, white background."),
        )),
    },
    "fr": {
        1: DayPlan(1, "Haut du corps (Poussée) & HIIT", "Pectoraux, Épaules, Triceps", (
            Exercise("Développé couché à la barre", "4 séries", "6-8 reps",
                     "Gardez votre dos plat sur le banc et les pieds fermement au sol pour la stabilité.",
                     "Une illustration visuelle claire, détaillée et anatomiquement correcte d'un homme effectuant un développé couché à la barre, montrant la bonne forme. Style de diagramme de fitness, fond blanc."),
            Exercise("Développé incliné avec haltères", "3 séries", "8-12 reps",
                     "Concentrez-vous sur la contraction de vos pectoraux en haut du mouvement. Ne bloquez pas vos coudes.",
                     "Une illustration visuelle claire, détaillée et anatomiquement correcte d'un homme effectuant un développé incliné avec haltères sur un banc. Style de diagramme de fitness, fond blanc."),
            Exercise("Développé militaire à la barre", "4 séries", "6-8 reps",
                     "Contractez vos abdominaux pour protéger votre bas du dos. Poussez la barre bien droit.",
                     "Une illustration visuelle claire, détaillée et anatomiquement correcte d'un homme effectuant un développé militaire debout à la barre. Style de diagramme de fitness, fond blanc."),
            Exercise("Élévations latérales", "3 séries", "12-15 reps",
                     "Évitez d'utiliser l'élan. Soulevez les poids de manière contrôlée, en menant avec les coudes.",
                     "Une illustration visuelle claire, détaillée et anatomiquement correcte d'un homme effectuant des élévations latérales avec haltères. Style de diagramme de fitness, fond blanc."),
            Exercise("Poussées à la poulie pour triceps", "3 séries", "10-15 reps",
                     "Gardez vos coudes près de vos flancs pendant tout le mouvement.",
                     "Une illustration visuelle claire, détaillée et anatomiquement correcte d'un homme effectuant une poussée pour les triceps à la machine à câble. Style de diagramme de fitness, fond blanc."),
            Exercise("HIIT: Sprints sur tapis roulant", "10 tours", "30s sprint, 60s marche",
                     "Donnez tout pendant les sprints et utilisez la marche pour récupérer votre souffle.",
                     "Photo d'action dynamique d'un homme en forme sprintant à grande vitesse sur un tapis roulant. Style d'illustration de fitness, sensation de mouvement."),
        )),
        2: DayPlan(2, "Haut du corps (Tirage) & LISS", "Dos, Biceps", (
            Exercise("Rowing barre buste penché", "4 séries", "6-8 reps",
                     "Gardez le dos plat et tirez la barre vers le bas de votre poitrine. Serrez les omoplates.",
                     "Une illustration visuelle claire, détaillée et anatomiquement correcte d'un homme effectuant un rowing barre buste penché. Style de diagramme de fitness, fond blanc."),
            Exercise("Tirage vertical à la poulie haute", "4 séries", "8-12 reps",
                     "Menez avec les coudes et tirez la barre vers le haut de votre poitrine. Concentrez-vous sur l'utilisation de vos muscles du dos.",
                     "Une illustration visuelle claire, détaillée et anatomiquement correcte d'un homme effectuant un tirage vertical à la machine à câble. Style de diagramme de fitness, fond blanc."),
            Exercise("Rowing assis à la poulie basse", "3 séries", "10-12 reps",
                     "Gardez le torse droit et tirez la poignée vers votre ventre. Évitez de trop vous pencher en arrière.",
                     "Une illustration visuelle claire, détaillée et anatomiquement correcte d'un homme effectuant un rowing assis à la poulie basse. Style de diagramme de fitness, fond blanc."),
            Exercise("Face pulls", "3 séries", "15-20 reps",
                     "Tirez la corde vers votre visage, en visant à amener vos mains près de vos oreilles. Excellent pour la santé des épaules.",
                     "Une illustration visuelle claire, détaillée et anatomiquement correcte d'un homme effectuant un face pull avec une corde à la machine à câble. Style de diagramme de fitness, fond blanc."),
            Exercise("Flexions des biceps avec haltères", "3 séries", "10-15 reps",
                     "Gardez vos coudes immobiles sur les côtés. Évitez de balancer les poids.",
                     "Une illustration visuelle claire, détaillée et anatomiquement correcte d'un homme effectuant des flexions de biceps debout avec haltères. Style de diagramme de fitness, fond blanc."),
            Exercise("LISS: Marche inclinée", "1 session", "30 mins, rythme constant",
                     "Maintenez un rythme constant sur une pente difficile pour garder votre fréquence cardiaque élevée.",
                     "Illustration d'un homme marchant à un rythme constant sur un tapis roulant incliné. Style fitness."),
        )),
        3: DayPlan(3, "Jour des jambes", "Quadriceps, Ischio-jambiers, Fessiers", (
            Exercise("Squats à la barre", "4 séries", "6-8 reps",
                     "Gardez la poitrine haute et le dos droit. Descendez jusqu'à ce que vos cuisses soient au moins parallèles au sol.",
                     "Une illustration visuelle claire, détaillée et anatomiquement correcte d'un homme effectuant un squat arrière à la barre. Style de diagramme de fitness, fond blanc."),
            Exercise("Soulevé de terre roumain", "3 séries", "8-12 reps",
                     "Basculez au niveau des hanches, en gardant les jambes presque droites (légère flexion). Sentez l'étirement dans vos ischio-jambiers.",
                     "Une illustration visuelle claire, détaillée et anatomiquement correcte d'un homme effectuant un soulevé de terre roumain avec une barre. Style de diagramme de fitness, fond blanc."),
            Exercise("Presse à cuisses", "3 séries", "10-15 reps",
                     "Ne laissez pas le bas de votre dos s'arrondir sur le coussin. Contrôlez le poids en descendant.",
                     "Une illustration visuelle claire, détaillée et anatomiquement correcte d'un homme utilisant une presse à cuisses. Style de diagramme de fitness, fond blanc."),
            Exercise("Flexions des jambes", "3 séries", "12-15 reps",
                     "Concentrez-vous sur la contraction de vos ischio-jambiers pour enrouler le poids. Évitez d'utiliser le bas de votre dos.",
                     "Une illustration visuelle claire, détaillée et anatomiquement correcte d'un homme utilisant une machine de flexion des jambes allongée. Style de diagramme de fitness, fond blanc."),
            Exercise("Élévations des mollets", "4 séries", "15-20 reps",
                     "Obtenez un étirement complet en bas et une forte contraction en haut du mouvement.",
                     "Une illustration visuelle claire, détaillée et anatomiquement correcte d'un homme effectuant des élévations de mollets debout. Style de diagramme de fitness, fond blanc."),
            Exercise("Récupération sur tapis roulant", "1 session", "15 mins, jogging léger",
                     "Abaissez progressivement votre fréquence cardiaque. Cela aide à la récupération.",
                     "Illustration d'un homme faisant un jogging léger sur un tapis roulant pour récupérer. Style fitness décontracté."),
        )),
        4: DayPlan(4, "Corps complet & Tronc", "Force & Stabilité", (
            Exercise("Goblet Squats avec haltère", "3 séries", "8-10 reps",
                     "Tenez un haltère verticalement contre votre poitrine. Gardez le torse droit pendant que vous squattez.",
                     "Une illustration visuelle claire, détaillée et anatomiquement correcte d'un homme effectuant un goblet squat avec haltère. Style de diagramme de fitness, fond blanc."),
            Exercise("Développé couché avec haltères", "3 séries", "8-10 reps",
                     "Fournit un plus grand défi de stabilité qu'une barre. Contrôlez les haltères sur toute l'amplitude du mouvement.",
                     "Une illustration visuelle claire, détaillée et anatomiquement correcte d'un homme effectuant un développé couché plat avec haltères. Style de diagramme de fitness, fond blanc."),
            Exercise("Rowing à un bras avec haltère", "3 séries", "8-10 reps / bras",
                     "Soutenez-vous avec une main sur un banc. Tirez l'haltère vers votre hanche, pas votre poitrine.",
                     "Une illustration visuelle claire, détaillée et anatomiquement correcte d'un homme effectuant un rowing à un bras avec haltère. Style de diagramme de fitness, fond blanc."),
            Exercise("Développé Arnold", "3 séries", "10-12 reps",
                     "Cet exercice implique une rotation, alors utilisez un poids plus léger pour maîtriser la forme d'abord.",
                     "Une illustration visuelle claire et anatomiquement correcte montrant la séquence d'un développé Arnold avec des haltères. Style de diagramme de fitness, fond blanc."),
            Exercise("Planche", "3 séries", "Tenir jusqu'à l'échec",
                     "Gardez une ligne droite de la tête aux talons. Ne laissez pas vos hanches s'affaisser.",
                     "Une illustration visuelle claire, détaillée et anatomiquement correcte d'un homme tenant une position de planche correcte. Style de diagramme de fitness, fond blanc."),
            Exercise("Course sur tapis roulant", "1 session", "15 mins, rythme modéré",
                     "Trouvez un rythme que vous pouvez maintenir pendant les 15 minutes pour développer l'endurance cardiovasculaire.",
                     "Illustration d'un homme courant à un rythme régulier et modéré sur un tapis roulant. Style fitness."),
        )),
        5: DayPlan(5, "Récupération active & Cardio", "Endurance & Flexibilité", (
            Exercise("Cardio LISS: Marche sur tapis roulant", "1 session", "45 mins, marche rapide",
                     "Maintenez votre fréquence cardiaque dans une zone stable et de faible intensité. C'est excellent pour brûler les graisses et récupérer.",
                     "Illustration d'un homme faisant une marche rapide sur un tapis roulant pour une séance de cardio de longue durée. Style fitness."),
            Exercise("Roulage avec rouleau en mousse", "1 session", "10-15 mins",
                     "Roulez lentement sur les groupes musculaires tendus pour relâcher la tension et améliorer la flexibilité.",
                     "Une illustration claire d'une personne utilisant un rouleau en mousse sur les muscles de ses jambes. Style de diagramme de fitness décontracté, fond blanc."),
            Exercise("Étirements", "1 session", "10-15 mins",
                     "Maintenez chaque étirement pendant 20 à 30 secondes. Concentrez-vous sur les principaux groupes musculaires travaillés pendant la semaine.",
                     "Une illustration claire d'une personne faisant une routine d'étirements du corps entier, tenant un étirement des ischio-jambiers. Style de diagramme de fitness, fond blanc."),
        )),
    },
}


def canonical_plan() -> Dict[int, DayPlan]:
    return WORKOUT_PLANS[CANONICAL_LANG]


def plan_for(lang: str) -> Dict[int, DayPlan]:
    """Display plan for `lang`, falling back to the canonical one."""
    return WORKOUT_PLANS.get(lang, canonical_plan())


def exercise_names(plan: Dict[int, DayPlan]) -> set:
    return {ex.name for day in plan.values() for ex in day.exercises}
