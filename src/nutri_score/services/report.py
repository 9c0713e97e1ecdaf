"""Plain text rendering of score results."""

from nutri_score.domain.scores import ScoreResult
from nutri_score.domain.thresholds import ThresholdSet

LABEL_WIDTH = 13


def render_bar(label: str, points: int, total: int, positive: bool) -> str:
    """Render a single nutrient as a labeled progress bar."""
    sign = "+" if positive else "-"
    bar = "#" * points + "-" * (total - points)
    return f"{label:<{LABEL_WIDTH}} {points:>2}/{total:<2} {sign}[{bar}]"


def render_box(text: str) -> str:
    """Draw a single-line box around ``text``."""
    width = len(text) + 2
    return "\n".join(
        [
            "┌" + "─" * width + "┐",
            f"│ {text} │",
            "└" + "─" * width + "┘",
        ]
    )


def render_report(result: ScoreResult, tables: ThresholdSet) -> str:
    """Render every nutrient bar followed by the boxed grade."""
    breakdown = result.breakdown
    lines = [
        render_bar("Energy", breakdown.energy_points, len(tables.energy), False),
        render_bar("Sugar", breakdown.sugar_points, len(tables.sugar), False),
        render_bar("Fats", breakdown.fat_points, len(tables.saturated_fat), False),
        render_bar("Sodium", breakdown.sodium_points, len(tables.sodium), False),
        render_bar("Fruits & Vegs", breakdown.fruit_points, len(tables.fruits), True),
    ]
    if breakdown.fibers_and_proteins_counted:
        lines.append(
            render_bar("Fibers", breakdown.fiber_points, len(tables.fiber), True)
        )
        lines.append(
            render_bar("Protein", breakdown.protein_points, len(tables.protein), True)
        )
    else:
        lines.extend(
            [
                "",
                f"The negative score {breakdown.negative} is more than 10 and the "
                f"fruit score {breakdown.fruit_points} is less than 5.",
                "Fibers and Proteins will not be counted!",
            ]
        )
    lines.extend(["", "Total Score:", render_box(str(result.grade))])
    return "\n".join(lines) + "\n"
