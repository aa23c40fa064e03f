"""Shared catalog of static texts shown by the screens."""

from __future__ import annotations

from unwind.core.types import DailyTime, PracticeTime, StretchLevel

STRETCH_LEVEL_OPTIONS: dict[StretchLevel, tuple[str, str]] = {
    StretchLevel.NEWBIE: ("Newbie", "I have never done a stretch exercise."),
    StretchLevel.NOVICE: ("Novice", "I haven't practiced in a long time."),
    StretchLevel.FAMILIAR: ("Familiar", "I practice stretching regularly."),
    StretchLevel.ADVANCED: ("Advanced", "I do advanced stretch exercises."),
}

DAILY_TIME_LABELS: dict[DailyTime, str] = {
    DailyTime.TEN: "10 minutes",
    DailyTime.TWENTY: "20 minutes",
    DailyTime.THIRTY: "30 minutes",
    DailyTime.FORTY_FIVE_PLUS: "45+ minutes",
}

PRACTICE_TIME_LABELS: dict[PracticeTime, str] = {
    PracticeTime.MORNING: "☀️ Morning",
    PracticeTime.EVENING: "🌙 Evening",
    PracticeTime.FLEXIBLE: "📅 Flexible Schedule",
}

WIZARD_TITLES = {
    "stretchLevel": "Select your stretch level.",
    "trainingDays": "When would you like to train?",
    "dailyTime": "How much time can you spend daily?",
    "practiceTime": "What time of day do you prefer to practice yoga?",
}

YOGA_POSES: list[tuple[str, str]] = [
    ("Mountain Pose", "2 min"),
    ("Warrior II", "3 min"),
    ("Tree Pose", "2 min"),
    ("Downward Dog", "3 min"),
    ("Child's Pose", "2 min"),
    ("Sun Salutation", "5 min"),
    ("Cobra Pose", "2 min"),
    ("Triangle Pose", "3 min"),
]

# Mock profile figures; there is no session history behind them.
PROFILE_NAME = "Sarah Johnson"
PROFILE_MEMBER_SINCE = "Member since June 2024"
PROFILE_STATS: list[tuple[str, str]] = [("24", "Sessions"), ("7", "Streak"), ("12h", "Total Time")]
PROGRESS_STATS: list[tuple[str, str]] = [("56", "Lifetime exercise sessions"), ("0", "Weekly goal streak")]

TERMS_OF_USE: list[tuple[str, str]] = [
    (
        "1. Acceptance of Terms",
        "By accessing and using Unwind Yoga mobile application, you accept and agree to be bound "
        "by the terms and provision of this agreement.",
    ),
    (
        "2. Description of Service",
        "Unwind Yoga provides personalized yoga and stretching routines, meditation guidance, and "
        "wellness tracking features through our mobile application.",
    ),
    (
        "3. User Responsibilities",
        "Users are responsible for consulting with healthcare professionals before beginning any "
        "exercise program. Practice at your own risk and within your physical limitations.",
    ),
    (
        "4. Intellectual Property",
        "All content, including videos, audio, text, and images, are the intellectual property of "
        "Unwind Yoga and are protected by copyright laws.",
    ),
    (
        "5. Limitation of Liability",
        "Unwind Yoga shall not be liable for any injuries or damages arising from the use of this "
        "application or following the provided exercises.",
    ),
    (
        "6. Updates to Terms",
        "We reserve the right to update these terms at any time. Users will be notified of "
        "significant changes through the application.",
    ),
]

PRIVACY_POLICY: list[tuple[str, str]] = [
    (
        "Information We Collect",
        "We collect information you provide directly to us, such as when you create an account, "
        "complete your profile, or contact us for support.",
    ),
    (
        "How We Use Your Information",
        "We use the information we collect to provide, maintain, and improve our services, "
        "personalize your experience, and communicate with you.",
    ),
    (
        "Information Sharing",
        "We do not sell, trade, or otherwise transfer your personal information to third parties "
        "without your consent, except as described in this policy.",
    ),
    (
        "Data Security",
        "We implement appropriate security measures to protect your personal information against "
        "unauthorized access, alteration, disclosure, or destruction.",
    ),
    (
        "Your Rights",
        "You have the right to access, update, or delete your personal information. You may also "
        "opt out of certain communications from us.",
    ),
    (
        "Contact Us",
        "If you have any questions about this Privacy Policy, please contact us at "
        "privacy@unwindyoga.com.",
    ),
]
