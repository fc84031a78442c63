import logging

from potential_model import PlayResult, export_summary, summarize
from potential_model.formatting import format_constant, format_display, format_rating, format_score


def main() -> None:
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    best = [
        PlayResult(score=9_950_000 - i * 20_000, constant=11.5 - (i % 6) * 0.2, title=f"Best {i + 1}", difficulty=2)
        for i in range(30)
    ]
    recent = [
        PlayResult(score=9_700_000 + i * 25_000, constant=10.0 + (i % 4) * 0.3, title=f"Recent {i + 1}", difficulty=3)
        for i in range(10)
    ]
    summary = summarize(best + recent, player="demo")

    print(f"Potential: {format_rating(summary.total)}  (shown {format_display(summary.total)})")
    print(f"B30 avg: {format_rating(summary.best30_avg)}  R10 avg: {format_rating(summary.recent10_avg)}")

    print("\nMinimum chart constant for +0.01:")
    for item in summary.required:
        print(f"{item.label:>5}: {format_constant(item.required_constant)}")

    print("\nTarget scores:")
    for entry in summary.best30 + summary.recent10:
        prefix = f"R{entry.rank}" if entry.recent else f"#{entry.rank}"
        target = format_score(entry.target.score) if entry.target else "cannot improve"
        print(
            f"{prefix:>4} {entry.result.title:<10} {format_score(entry.result.score):>10} "
            f"{format_rating(entry.rating)} -> {target}"
        )

    exported = export_summary(summary)
    print(f"\nExported {len(exported['best30'])} best and {len(exported['recent10'])} recent entries")


if __name__ == "__main__":
    main()
