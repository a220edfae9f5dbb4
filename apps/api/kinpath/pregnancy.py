"""Pregnancy companion: due date countdown, size comparisons, and weekly guidance."""
from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import datetime
from typing import Dict, List, Optional

from .age import FULL_TERM_WEEKS, resolve_now
from .schemas import Child


@dataclass(frozen=True)
class BabySizeComparison:
    week: int
    name: str
    length_cm: float
    weight_description: str
    emoji: str


@dataclass(frozen=True)
class PregnancyMilestone:
    week: int
    label: str


@dataclass(frozen=True)
class PlanningTip:
    week: int
    category: str  # health | preparation | shopping | social | self_care
    tip: str
    icon: str


@dataclass(frozen=True)
class MaternalChange:
    week: int
    body: str
    tip: str


@dataclass(frozen=True)
class DueDateCountdown:
    total_days_remaining: int
    weeks_remaining: int
    days_remainder: int
    percent_complete: int
    trimester: int
    gestational_week: int
    milestone: str
    encouragement: str


# Sizes follow standard fetal development references.
SIZE_COMPARISONS: List[BabySizeComparison] = [
    BabySizeComparison(4, "poppy seed", 0.1, "less than 1g", "🌱"),
    BabySizeComparison(5, "sesame seed", 0.2, "less than 1g", "🌱"),
    BabySizeComparison(6, "lentil", 0.6, "less than 1g", "🫘"),
    BabySizeComparison(7, "blueberry", 1.3, "less than 1g", "🫐"),
    BabySizeComparison(8, "raspberry", 1.6, "about 1g", "🫐"),
    BabySizeComparison(9, "cherry", 2.3, "about 2g", "🍒"),
    BabySizeComparison(10, "strawberry", 3.1, "about 4g", "🍓"),
    BabySizeComparison(11, "fig", 4.1, "about 7g", "🍇"),
    BabySizeComparison(12, "lime", 5.4, "about 14g", "🍋"),
    BabySizeComparison(13, "peach", 7.4, "about 23g", "🍑"),
    BabySizeComparison(14, "lemon", 8.7, "about 43g", "🍋"),
    BabySizeComparison(15, "apple", 10.1, "about 70g", "🍎"),
    BabySizeComparison(16, "avocado", 11.6, "about 100g", "🥑"),
    BabySizeComparison(17, "pear", 13.0, "about 140g", "🍐"),
    BabySizeComparison(18, "bell pepper", 14.2, "about 190g", "🫑"),
    BabySizeComparison(19, "mango", 15.3, "about 240g", "🥭"),
    BabySizeComparison(20, "banana", 25.6, "about 300g", "🍌"),
    BabySizeComparison(21, "carrot", 26.7, "about 360g", "🥕"),
    BabySizeComparison(22, "papaya", 27.8, "about 430g", "🍈"),
    BabySizeComparison(23, "grapefruit", 28.9, "about 500g", "🍊"),
    BabySizeComparison(24, "ear of corn", 30.0, "about 600g", "🌽"),
    BabySizeComparison(25, "rutabaga", 34.6, "about 660g", "🥔"),
    BabySizeComparison(26, "zucchini", 35.6, "about 760g", "🥒"),
    BabySizeComparison(27, "cauliflower", 36.6, "about 875g", "🥦"),
    BabySizeComparison(28, "eggplant", 37.6, "about 1kg", "🍆"),
    BabySizeComparison(29, "butternut squash", 38.6, "about 1.15kg", "🎃"),
    BabySizeComparison(30, "coconut", 39.9, "about 1.3kg", "🥥"),
    BabySizeComparison(31, "pineapple", 41.1, "about 1.5kg", "🍍"),
    BabySizeComparison(32, "jicama", 42.4, "about 1.7kg", "🥔"),
    BabySizeComparison(33, "celery bunch", 43.7, "about 1.9kg", "🥬"),
    BabySizeComparison(34, "cantaloupe", 45.0, "about 2.1kg", "🍈"),
    BabySizeComparison(35, "honeydew melon", 46.2, "about 2.4kg", "🍈"),
    BabySizeComparison(36, "romaine lettuce", 47.4, "about 2.6kg", "🥬"),
    BabySizeComparison(37, "Swiss chard bunch", 48.6, "about 2.9kg", "🥬"),
    BabySizeComparison(38, "leek", 49.8, "about 3.0kg", "🥬"),
    BabySizeComparison(39, "small watermelon", 50.7, "about 3.3kg", "🍉"),
    BabySizeComparison(40, "watermelon", 51.2, "about 3.5kg", "🍉"),
]

PREGNANCY_MILESTONES: List[PregnancyMilestone] = [
    PregnancyMilestone(8, "First ultrasound window"),
    PregnancyMilestone(12, "End of first trimester"),
    PregnancyMilestone(13, "Second trimester begins"),
    PregnancyMilestone(16, "You might feel movement soon"),
    PregnancyMilestone(20, "Halfway there!"),
    PregnancyMilestone(24, "Viability milestone"),
    PregnancyMilestone(27, "Third trimester begins"),
    PregnancyMilestone(28, "Third trimester"),
    PregnancyMilestone(32, "Baby shower time"),
    PregnancyMilestone(36, "Full term in one month"),
    PregnancyMilestone(37, "Early term, baby could arrive any day"),
    PregnancyMilestone(39, "Full term"),
    PregnancyMilestone(40, "Due date week"),
]

WEEKLY_ENCOURAGEMENTS: Dict[int, str] = {
    4: "A tiny miracle is just beginning. Take it one day at a time.",
    5: "Your baby's heart is starting to form this week.",
    6: "Tiny arms and legs are budding. You're doing amazing.",
    7: "Baby's brain is growing rapidly. Rest when you need to.",
    8: "Fingers and toes are forming. What a journey you're on.",
    9: "Baby can make tiny movements now, even if you can't feel them yet.",
    10: "All major organs are formed. The foundation is set.",
    11: "Baby is starting to look more human-shaped. Almost out of the first trimester!",
    12: "The first trimester finish line is in sight. You made it through the toughest part.",
    13: "Welcome to the second trimester! Energy levels often improve from here.",
    14: "Baby might be making facial expressions. The adventure continues.",
    15: "Baby can sense light now. Things are getting exciting.",
    16: "You might start feeling those first little flutters soon.",
    17: "Baby's skeleton is hardening from cartilage to bone.",
    18: "Baby might be yawning and stretching in there. So cozy.",
    19: "Almost halfway! Take a moment to celebrate how far you've come.",
    20: "Halfway milestone! Baby can hear your voice now.",
    21: "Baby's movements are getting stronger. Such an incredible feeling.",
    22: "Baby's senses are developing rapidly. Talk and sing to them.",
    23: "Baby's face is fully formed. They look like a tiny human.",
    24: "A big milestone, baby has reached viability. You're incredible.",
    25: "Baby is gaining weight and getting stronger every day.",
    26: "Baby's eyes are opening. They're starting to see the world.",
    27: "Welcome to the third trimester! The home stretch.",
    28: "Baby is dreaming now. Sweet dreams, little one.",
    29: "Baby's bones are soaking up calcium. Keep up the good nutrition.",
    30: "Ten weeks to go. Baby is getting ready to meet you.",
    31: "Baby's brain is making billions of connections. Incredible.",
    32: "Baby is practicing breathing motions. Almost ready.",
    33: "Baby's immune system is developing. You're giving them a great start.",
    34: "Baby's lungs are maturing. Almost there.",
    35: "Baby is gaining about half a pound per week now.",
    36: "Full term is just around the corner. You've got this.",
    37: "Baby is officially early term. They could arrive any day.",
    38: "Baby is shedding the waxy coating. Getting ready for their debut.",
    39: "Full term! Baby is ready when they're ready.",
    40: "Due date week! Remember, only 5% of babies arrive on their due date.",
}

DEFAULT_ENCOURAGEMENT = "Every day brings you closer to meeting your little one."

MATERNAL_CHANGES: List[MaternalChange] = [
    MaternalChange(4, "You might notice a missed period and some light cramping.", "Start prenatal vitamins if you haven't already."),
    MaternalChange(5, "Morning sickness may begin. Fatigue is very common.", "Eat small, frequent meals to manage nausea."),
    MaternalChange(6, "Breast tenderness and frequent urination are typical.", "Wear a comfortable, supportive bra."),
    MaternalChange(7, "Nausea may intensify. Food aversions are normal.", "Ginger tea or crackers before getting up can help."),
    MaternalChange(8, "Your uterus is about the size of a large orange now.", "Stay hydrated, aim for 8-10 glasses of water daily."),
    MaternalChange(9, "Your waistline may start to thicken slightly.", "Gentle walks can help with fatigue and mood."),
    MaternalChange(10, "Visible veins may appear as blood volume increases.", "Increase iron-rich foods to support blood production."),
    MaternalChange(11, "Bloating and gas are common this week.", "Eat slowly and avoid carbonated drinks."),
    MaternalChange(12, "Morning sickness often starts to ease around now.", "This is a great week to celebrate, you made it through the first trimester!"),
    MaternalChange(13, "Energy levels often improve as you enter the second trimester.", "Take advantage of the energy boost for light exercise."),
    MaternalChange(14, "Your appetite may return. The baby bump may become visible.", "Focus on nutrient-dense foods, protein, iron, calcium."),
    MaternalChange(15, "Nasal congestion and occasional nosebleeds can occur.", "Use a humidifier at night for congestion relief."),
    MaternalChange(16, "You may feel the first flutters of movement (quickening).", "Sit or lie quietly to notice those first tiny movements."),
    MaternalChange(17, "Your center of gravity is shifting. Balance may feel off.", "Wear flat, supportive shoes when possible."),
    MaternalChange(18, "Leg cramps and mild swelling in feet may begin.", "Stretch your calves before bed. Elevate feet when resting."),
    MaternalChange(19, "Skin changes like darkening of the linea alba are common.", "Wear sunscreen, pregnancy hormones increase sun sensitivity."),
    MaternalChange(20, "Your uterus has reached your navel. Halfway there!", "Consider prenatal yoga or swimming for gentle exercise."),
    MaternalChange(21, "Stretch marks may start to appear. Heartburn can increase.", "Keep skin moisturized. Eat smaller meals for heartburn."),
    MaternalChange(22, "Braxton Hicks contractions may start, your body is practicing.", "Stay hydrated, dehydration can trigger Braxton Hicks."),
    MaternalChange(23, "Swollen gums and occasional bleeding when brushing are normal.", "Keep up dental hygiene, see your dentist if needed."),
    MaternalChange(24, "Back pain may increase as baby grows.", "Practice good posture and consider a pregnancy pillow."),
    MaternalChange(25, "Trouble sleeping is common. Heartburn may worsen at night.", "Sleep on your left side with a pillow between your knees."),
    MaternalChange(26, "Baby's kicks are getting stronger and more regular.", "Start counting kicks, note patterns of activity."),
    MaternalChange(27, "Shortness of breath may begin as your uterus presses up.", "Slow down and take breaks. This is completely normal."),
    MaternalChange(28, "Swelling in ankles and feet may increase.", "Reduce salt intake and prop your feet up when resting."),
    MaternalChange(29, "Frequent urination returns as baby presses on your bladder.", "Don't reduce water intake, just plan for bathroom breaks."),
    MaternalChange(30, "Fatigue returns. Your body is working hard growing baby.", "Nap when you can. Accept help from others."),
    MaternalChange(31, "Braxton Hicks may become more noticeable.", "Practice breathing techniques for labor preparation."),
    MaternalChange(32, "Heartburn and shortness of breath may peak.", "Eat smaller meals, and prop yourself up at night."),
    MaternalChange(33, "Baby may drop lower (lightening), easing breathing.", "Pelvic floor exercises can help with increased pressure."),
    MaternalChange(34, "Pelvic pressure increases. Waddle walk is normal.", "Warm baths can soothe aches. Avoid very hot water."),
    MaternalChange(35, "Colostrum may begin leaking from breasts.", "Nursing pads can help. This is your body preparing."),
    MaternalChange(36, "You may gain about a pound per week now.", "Finalize your hospital bag and birth plan."),
    MaternalChange(37, "Cervix may begin to dilate. Nesting instinct kicks in.", "Channel nesting energy wisely, rest is important too."),
    MaternalChange(38, "Increased vaginal discharge and mucus plug loss are normal.", "Know the signs of labor vs. false labor."),
    MaternalChange(39, "Contractions may become more regular. Baby drops further.", "Time any contractions. Call your provider if they're 5 min apart."),
    MaternalChange(40, "Due date week. Only 5% of babies arrive right on time.", "Stay patient and comfortable. Your baby is almost here."),
]

PLANNING_TIPS: List[PlanningTip] = [
    # First trimester
    PlanningTip(5, "health", "Schedule your first prenatal appointment", "calendar"),
    PlanningTip(6, "self_care", "Start a daily prenatal vitamin if you haven't already", "pill"),
    PlanningTip(8, "health", "Your first ultrasound may be coming up, exciting!", "heart"),
    PlanningTip(9, "self_care", "Rest is important right now. Listen to your body.", "moon"),
    PlanningTip(10, "social", "Decide when you'd like to share the news with close family", "users"),
    PlanningTip(11, "health", "Genetic screening tests are often offered around now", "clipboard"),
    PlanningTip(12, "social", "Many families start sharing the news after the first trimester", "megaphone"),
    # Second trimester
    PlanningTip(13, "shopping", "Start browsing maternity clothes, comfort matters", "shopping-bag"),
    PlanningTip(14, "health", "Great time to start gentle prenatal exercise if cleared by your provider", "activity"),
    PlanningTip(16, "preparation", "Start thinking about childcare options, waitlists fill up fast", "search"),
    PlanningTip(18, "health", "Anatomy scan usually happens between weeks 18-22", "scan"),
    PlanningTip(20, "preparation", "Start your baby registry, halfway is a great time to begin", "gift"),
    PlanningTip(22, "preparation", "Research pediatricians in your area", "search"),
    PlanningTip(24, "preparation", "Consider signing up for a childbirth class", "book"),
    PlanningTip(25, "health", "Glucose screening test is usually done around weeks 24-28", "clipboard"),
    PlanningTip(26, "preparation", "Start thinking about your birth plan", "file-text"),
    # Third trimester
    PlanningTip(28, "preparation", "Begin setting up the nursery, nesting mode activated!", "home"),
    PlanningTip(29, "health", "Count baby's kicks daily, 10 movements in 2 hours is typical", "activity"),
    PlanningTip(30, "preparation", "Research car seat options and practice installation", "car"),
    PlanningTip(31, "preparation", "Write or finalize your birth plan", "file-text"),
    PlanningTip(32, "shopping", "Stock up on newborn essentials, diapers, onesies, burp cloths", "shopping-bag"),
    PlanningTip(33, "social", "Baby shower time! Enjoy celebrating with loved ones", "gift"),
    PlanningTip(34, "preparation", "Pre-register at your hospital or birth center", "clipboard"),
    PlanningTip(35, "preparation", "Install the car seat and have it inspected", "check-circle"),
    PlanningTip(36, "preparation", "Pack your hospital bag, it's almost go-time!", "briefcase"),
    PlanningTip(37, "preparation", "Prep some freezer meals for postpartum recovery", "utensils"),
    PlanningTip(38, "self_care", "Rest, relax, and soak in these last days. You're ready.", "sun"),
    PlanningTip(39, "health", "Know the signs of labor, timing contractions, water breaking", "clock"),
    PlanningTip(40, "self_care", "Due dates are estimates. Baby will come when ready. You've got this!", "heart"),
]


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def _clamp_week(gestational_week: float) -> int:
    return max(4, min(FULL_TERM_WEEKS, _round_half_up(gestational_week)))


def get_baby_size_comparison(gestational_week: float) -> Optional[BabySizeComparison]:
    week = _clamp_week(gestational_week)
    return next((size for size in SIZE_COMPARISONS if size.week == week), None)


def get_maternal_changes(gestational_week: float) -> Optional[MaternalChange]:
    week = _clamp_week(gestational_week)
    return next((change for change in MATERNAL_CHANGES if change.week == week), None)


def get_all_pregnancy_milestones() -> List[PregnancyMilestone]:
    return list(PREGNANCY_MILESTONES)


def get_planning_tips(gestational_week: int, look_ahead_weeks: int = 2) -> List[PlanningTip]:
    """Tips for the current gestational week plus a short look-ahead."""

    start = max(4, gestational_week)
    end = min(FULL_TERM_WEEKS, gestational_week + look_ahead_weeks)
    return [tip for tip in PLANNING_TIPS if start <= tip.week <= end]


def get_due_date_countdown(child: Child, now: Optional[datetime] = None) -> Optional[DueDateCountdown]:
    """Countdown for an unborn child; None once born or without a due date.

    Works on calendar days, so the time of day does not move the count.
    """
    if child.is_born or not child.due_date:
        return None

    today = resolve_now(now).date()
    total_days_remaining = max(0, (child.due_date - today).days)
    weeks_remaining, days_remainder = divmod(total_days_remaining, 7)

    gestational_week = min(FULL_TERM_WEEKS, max(1, FULL_TERM_WEEKS - weeks_remaining))
    percent_complete = min(100, _round_half_up(gestational_week / FULL_TERM_WEEKS * 100))

    if gestational_week <= 12:
        trimester = 1
    elif gestational_week <= 26:
        trimester = 2
    else:
        trimester = 3

    milestone = next(
        (m.label for m in PREGNANCY_MILESTONES if m.week >= gestational_week),
        "Almost there!",
    )

    return DueDateCountdown(
        total_days_remaining=total_days_remaining,
        weeks_remaining=weeks_remaining,
        days_remainder=days_remainder,
        percent_complete=percent_complete,
        trimester=trimester,
        gestational_week=gestational_week,
        milestone=milestone,
        encouragement=WEEKLY_ENCOURAGEMENTS.get(gestational_week, DEFAULT_ENCOURAGEMENT),
    )
