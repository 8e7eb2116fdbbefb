# taskboss/core/constants.py
import enum


class AIUseCase(str, enum.Enum):
    CHAT = "chat"
    QUOTE = "quote"
    TASK_ADVICE = "task_advice"


class AdviceMode(str, enum.Enum):
    STEP_GUIDE = "step_guide"
    BREAKDOWN = "breakdown"
    TIPS = "tips"
    TROUBLESHOOT = "troubleshoot"


class AchievementRarity(str, enum.Enum):
    COMMON = "common"
    RARE = "rare"
    EPIC = "epic"
    LEGENDARY = "legendary"


# Achievement catalogue. `metric` names a UserStats column, unlocked when
# the column value reaches `target`.
ACHIEVEMENTS = [
    {
        "id": "first_task",
        "title": "First Step",
        "description": "Complete your first task",
        "rarity": AchievementRarity.COMMON,
        "points": 50,
        "metric": "tasks_completed",
        "target": 1,
    },
    {
        "id": "tasks_10",
        "title": "Productive",
        "description": "Complete 10 tasks",
        "rarity": AchievementRarity.COMMON,
        "points": 100,
        "metric": "tasks_completed",
        "target": 10,
    },
    {
        "id": "tasks_50",
        "title": "Task Machine",
        "description": "Complete 50 tasks",
        "rarity": AchievementRarity.RARE,
        "points": 250,
        "metric": "tasks_completed",
        "target": 50,
    },
    {
        "id": "streak_3",
        "title": "Warming Up",
        "description": "Keep a 3 day streak",
        "rarity": AchievementRarity.COMMON,
        "points": 100,
        "metric": "longest_streak",
        "target": 3,
    },
    {
        "id": "streak_7",
        "title": "Unstoppable",
        "description": "Keep a 7 day streak",
        "rarity": AchievementRarity.RARE,
        "points": 300,
        "metric": "longest_streak",
        "target": 7,
    },
    {
        "id": "points_1000",
        "title": "Point Collector",
        "description": "Earn 1,000 points",
        "rarity": AchievementRarity.RARE,
        "points": 200,
        "metric": "total_points",
        "target": 1000,
    },
    {
        "id": "points_5000",
        "title": "XP Millionaire",
        "description": "Earn 5,000 points",
        "rarity": AchievementRarity.EPIC,
        "points": 500,
        "metric": "total_points",
        "target": 5000,
    },
    {
        "id": "level_5",
        "title": "Beginner Master",
        "description": "Reach level 5",
        "rarity": AchievementRarity.RARE,
        "points": 150,
        "metric": "current_level",
        "target": 5,
    },
    {
        "id": "level_10",
        "title": "Experienced Master",
        "description": "Reach level 10",
        "rarity": AchievementRarity.EPIC,
        "points": 400,
        "metric": "current_level",
        "target": 10,
    },
    {
        "id": "legend",
        "title": "Legend",
        "description": "Reach level 20",
        "rarity": AchievementRarity.LEGENDARY,
        "points": 1000,
        "metric": "current_level",
        "target": 20,
    },
]


# Served when no model could produce a quote
FALLBACK_QUOTES = [
    {
        "quote": "The secret of getting ahead is getting started.",
        "author": "Mark Twain",
    },
    {
        "quote": "It always seems impossible until it's done.",
        "author": "Nelson Mandela",
    },
    {
        "quote": "Well done is better than well said.",
        "author": "Benjamin Franklin",
    },
    {
        "quote": "Action is the foundational key to all success.",
        "author": "Pablo Picasso",
    },
    {
        "quote": "Small deeds done are better than great deeds planned.",
        "author": "Peter Marshall",
    },
]


ADVICE_PROMPTS = {
    AdviceMode.STEP_GUIDE: """
        Based on the task "{title}", give me a detailed step-by-step guide for completing it.

        The guide should:
        - Be concrete, with at least 5-8 numbered steps
        - Include precise instructions (where to click, what to choose, how to get there)
        - Add an important tip for each step
        """,
    AdviceMode.BREAKDOWN: """
        Break the task "{title}" down into 4-7 small, manageable sub-tasks.

        Each sub-task should be:
        - Concrete and clear
        - Doable in 15-45 minutes
        - Have a measurable outcome
        - Follow logically from the previous one
        """,
    AdviceMode.TIPS: """
        Give me practical, professional advice for completing the task "{title}".

        Include:
        - 4-6 key tips for success
        - Common pitfalls to avoid
        - Recommended tools or resources
        - Ways to save time
        """,
    AdviceMode.TROUBLESHOOT: """
        What are the most common problems when working on the task "{title}", and how do I solve them?

        Include:
        - 3-5 common technical problems and their fixes
        - Process difficulties and how to handle them
        - How to prevent problems up front
        - What to do when things don't work
        """,
}
