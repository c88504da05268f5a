"""
Deterministic content generators.

Each builder turns the topic, the theme set and the ranked insights into one
part of the strategy document. Theme positions 0-2 are optional; builders
fall back to fixed phrases when the theme set is short.
"""
from typing import Optional

from .models import OutlineSegment, ScriptSection, SeoBlock, VideoInsight

MAX_TAGS = 12

# Hand-tuned (start, end) per breakdown index; not formula-derived.
BREAKDOWN_TIMINGS = [
    ("0:45", "2:30"),
    ("2:30", "4:00"),
    ("4:00", "5:30"),
]


def _theme(themes: list[str], index: int, default: str) -> str:
    return themes[index] if len(themes) > index else default


def _capitalize(word: str) -> str:
    return word[:1].upper() + word[1:]


def _with_article(phrase: str) -> str:
    return f"{'an' if phrase[:1].lower() in 'aeiou' else 'a'} {phrase}"


def build_summary(topic: str, insights: list[VideoInsight], themes: list[str]) -> str:
    """Cite the top three videos and the leading themes."""
    theme_line = (
        f" Key momentum revolves around {', '.join(themes[:3])}." if themes else ""
    )
    references = "; ".join(
        f"{insight.title} ({insight.views:,} views)" for insight in insights[:3]
    )
    return (
        f"Audience interest in {topic} is clustering around a handful of "
        f"recurring angles.{theme_line} Notable reference videos: {references}. "
        "Use these as proof points to craft a differentiated position."
    )


def build_hook_ideas(topic: str, themes: list[str], audience: Optional[str] = None) -> list[str]:
    angle = _theme(themes, 0, "the biggest shift")
    hook_audience = f"{audience}, " if audience else ""
    return [
        f"{hook_audience}did you catch {angle} happening in {topic}? "
        "Here is why it matters right now.",
        f"I analyzed the most-watched {topic} videos this week so you can skip "
        "the hype and copy what works.",
        f"Before you make your next move in {topic}, you need to see how the top "
        "channels are framing the narrative.",
    ]


def build_narrative_angle(
    topic: str,
    themes: list[str],
    audience: Optional[str] = None,
    tone: Optional[str] = None,
) -> str:
    primary = _theme(themes, 0, "breakthroughs")
    secondary = _theme(themes, 1, "insights")
    persona = f" for {audience}" if audience else ""
    tonal = f"{tone} tone" if tone else "engaging tone"
    return (
        f"Lead with the most relatable storyline{persona}, highlighting {primary} "
        f"before unfolding supporting context around {secondary}, and keep "
        f"{_with_article(tonal)} throughout to make the topic feel actionable."
    )


def build_outline(topic: str, themes: list[str]) -> list[OutlineSegment]:
    """Hook, one breakdown per theme (up to three), then the action plan."""
    segments = [
        OutlineSegment(
            title="Hook & Context",
            duration_hint="0:00 - 0:45",
            talking_points=[
                f"Drop an attention-grabbing stat or question that ties {topic} "
                "to the viewer's everyday stakes.",
                "Position the problem or opportunity in one sentence.",
                "Promise the transformation viewers will get by watching.",
            ],
            broll_ideas=[
                "YouTube analytics dashboard zoom-in",
                "Trending article headlines montage",
                "Fast-cut reaction shots",
            ],
        )
    ]

    for index, theme in enumerate(themes[:3]):
        start, end = BREAKDOWN_TIMINGS[index]
        segments.append(
            OutlineSegment(
                title=f"Breakdown {index + 1}: {_capitalize(theme)}",
                duration_hint=f"{start} - {end}",
                talking_points=[
                    f"Summarize what top creators are saying about {theme}.",
                    "Call out what worked (hooks, pacing, visuals, CTAs).",
                    "Explain how your take will evolve or improve that angle.",
                ],
                broll_ideas=[
                    f"Screen recordings of top {theme} videos with animated highlights",
                    f"Overlay of key {theme} statistics or quotes",
                    "Relevant product or scenario footage",
                ],
            )
        )

    segments.append(
        OutlineSegment(
            title="Action Plan & CTA",
            duration_hint="5:30 - 7:00",
            talking_points=[
                "Summarize the playbook viewers can replicate.",
                "Share one bonus tip or contrarian insight.",
                "Invite engagement with a specific question or challenge.",
            ],
            broll_ideas=[
                "Clean over-the-shoulder shot of action steps checklist",
                "Call-to-action animation",
                "Satisfied audience reaction visuals",
            ],
        )
    )
    return segments


def build_script(
    topic: str,
    themes: list[str],
    audience: Optional[str] = None,
    tone: Optional[str] = None,
) -> list[ScriptSection]:
    """Five fixed sections: Hook, Segment 1-3, Call To Action."""
    persona = audience or "creators"
    tonal = tone or "energetic yet trustworthy"
    theme_one = _theme(themes, 0, "the game-changing shift")
    theme_two = _theme(themes, 1, "what top channels are doing differently")
    theme_three = _theme(themes, 2, "the roadmap you can follow today")

    return [
        ScriptSection(
            heading="Hook",
            paragraphs=[
                f"You won't believe how fast {topic} is evolving. One creator "
                f"cracked {theme_one}, and it's rewriting the rules.",
                f"If you're {persona}, stay with me: we're breaking down the exact "
                "moves driving millions of views right now.",
            ],
            callout=f"Promise: by the end of this video you'll know how to apply "
                    f"{theme_one} without copying anyone.",
        ),
        ScriptSection(
            heading="Segment 1",
            paragraphs=[
                f"Let's start with {theme_one}. The biggest breakout video frames "
                "it as a before-and-after transformation.",
                "Notice their pacing: a strong cold open, data-backed proof, and a "
                "cliffhanger before each reveal.",
                "Your spin? Anchor this shift to your viewers' lived reality. Make "
                "it personal, not abstract.",
            ],
        ),
        ScriptSection(
            heading="Segment 2",
            paragraphs=[
                f"Now, {theme_two}. Across top performers, the visuals never "
                "stall, with pattern interrupts every 6 seconds.",
                "Weave in motion graphics or quick cutaways that reinforce your "
                "main argument without feeling gimmicky.",
                f"Narrate in {_with_article(tonal)} voice. Bring the urgency without losing clarity.",
            ],
        ),
        ScriptSection(
            heading="Segment 3",
            paragraphs=[
                f"Finally, {theme_three}. Stack your advice as a mini roadmap: "
                "tease the payoff, outline steps, deliver the win.",
                "Close each beat with a forward-looking question. You're priming "
                "comments and retention at the same time.",
            ],
        ),
        ScriptSection(
            heading="Call To Action",
            paragraphs=[
                f"Drop your biggest breakthrough in {topic} inside the comments. "
                "We're building a community playbook together.",
                "If this breakdown helped, subscribe for the weekly trend download. "
                "Your next viral idea might be in tomorrow's feed.",
            ],
            callout="CTA: Like + subscribe + answer the question to boost "
                    "watch-time and signal the algorithm.",
        ),
    ]


def build_seo(topic: str, themes: list[str], keywords: list[str]) -> SeoBlock:
    """Title ideas, description and tags from themes followed by keywords."""
    combined = list(dict.fromkeys([*themes, *keywords]))[:MAX_TAGS]
    lead = _capitalize(themes[0]) if themes else "The Playbook"
    return SeoBlock(
        title_ideas=[
            f"{topic}: {lead} You Need Right Now",
            f"Stop Scrolling: {topic} Strategy the Top Creators Won't Share",
            f"{topic} Trend Report: {' • '.join(combined[:3])}",
        ],
        description=(
            f"I analyzed the most successful {topic} videos this week to decode "
            f"what actually works. Expect deep dives into {', '.join(combined[:5])}, "
            "plus a step-by-step plan you can copy for your next upload."
        ),
        tags=combined,
    )


def build_action_items(
    topic: str, themes: list[str], insights: list[VideoInsight]
) -> list[str]:
    chapters = [
        _theme(themes, 0, "the game-changing shift"),
        _theme(themes, 1, "what top channels are doing differently"),
        _theme(themes, 2, "the roadmap you can follow today"),
    ]
    references = " ".join(
        f'Watch "{insight.title}" to study their hook and pacing.'
        for insight in insights[:3]
    )
    return [
        f"Draft your opening hook anchoring {topic} to a real outcome your "
        "viewers want.",
        f"Storyboard three chapters around {', '.join(chapters)} and align "
        "visual interrupts for each.",
        references or "Save at least two reference videos to mirror their energy "
                      "and editing cadence.",
    ]
