"""Interactive CLI application."""
from datetime import datetime

from rich.console import Console
from rich.panel import Panel
from rich.prompt import Prompt
from rich.table import Table

from leitner_tutor.config import load_settings, setup_logging
from leitner_tutor.algorithm import get_bucket_range
from leitner_tutor.dashboard import get_progress_color, get_progress_label, get_review_stats
from leitner_tutor.flashcards import (
    advance_day, create_flashcard, get_card_hint, get_practice_session, get_progress,
    record_flashcard_result,
)
from leitner_tutor.models import AnswerDifficulty, CardNotFoundError
from leitner_tutor.seed import create_seeded_state
from leitner_tutor.state import FlashcardState

console = Console()

EXIT_WORDS = ("q", "menu")
RATINGS = {
    "w": AnswerDifficulty.WRONG,
    "h": AnswerDifficulty.HARD,
    "e": AnswerDifficulty.EASY,
}


class SessionExitRequested(Exception):
    """Raised when the user leaves a practice session early."""


def session_prompt(prompt: str, **kwargs) -> str:
    answer = Prompt.ask(prompt, **kwargs)
    if answer.strip().lower() in EXIT_WORDS:
        raise SessionExitRequested()
    return answer


def show_welcome():
    console.print(Panel(
        "[bold]Leitner Flashcards[/bold]\n[dim]Bucket-based spaced repetition[/dim]",
        title="Welcome", border_style="blue",
    ))


def show_menu(day: int):
    console.print(f"\n[bold]Day {day} - Commands:[/bold]")
    commands = [
        ("practice", "Review today's due cards"),
        ("hint", "Show the hint for a card"),
        ("add", "Create a new card"),
        ("progress", "Bucket counts + completion"),
        ("history", "Review history summary"),
        ("next", "Advance to the next day"),
        ("quit", "Exit"),
    ]
    for cmd, desc in commands:
        console.print(f"  [cyan]{cmd:<10}[/cyan] {desc}")


def run_practice_session(state: FlashcardState) -> int:
    """Walk through today's due cards. Returns the number of cards rated."""
    session = get_practice_session(state)
    if not session.cards:
        console.print(f"[yellow]No cards due on day {session.day}.[/yellow]")
        return 0
    console.print(f"\n[bold]Practice[/bold] - day {session.day}, {len(session.cards)} cards "
                  "[dim](q to stop)[/dim]\n")
    rated = 0
    for i, card in enumerate(session.cards, 1):
        console.print(Panel(card.front, title=f"Card {i}/{len(session.cards)}", border_style="cyan"))
        session_prompt("[dim]Press Enter to reveal answer[/dim]", default="", show_default=False)
        console.print(Panel(card.back, border_style="green"))
        choice = session_prompt("Rate yourself (w=wrong, h=hard, e=easy)", choices=[*RATINGS, *EXIT_WORDS])
        record = record_flashcard_result(state, card.front, card.back, RATINGS[choice])
        console.print(f"[dim]Bucket {record.previous_bucket} → {record.new_bucket}[/dim]\n")
        rated += 1
    return rated


def cmd_practice(state: FlashcardState):
    try:
        run_practice_session(state)
    except SessionExitRequested:
        console.print("[dim]Practice stopped. Answers so far are saved.[/dim]")


def cmd_hint(state: FlashcardState):
    front = Prompt.ask("Card front")
    back = Prompt.ask("Card back")
    hint = get_card_hint(state, front, back)
    console.print(f"[cyan]Hint:[/cyan] {hint or '[dim](none)[/dim]'}")


def cmd_add(state: FlashcardState):
    front = Prompt.ask("Front")
    back = Prompt.ask("Back")
    hint = Prompt.ask("Hint", default="")
    tags = Prompt.ask("Tags (comma separated)", default="")
    card = create_flashcard(state, front, back, hint=hint, tags=tags.split(","))
    console.print(f"[green]Added '{card.front}' to bucket 0.[/green]")


def cmd_progress(state: FlashcardState, learning_threshold: int):
    stats = get_progress(state, learning_threshold)
    pct = stats.completion_percentage
    color = get_progress_color(pct)
    label = get_progress_label(pct)

    bar_filled = int(pct / 5)
    bar = f"[{color}]{'█' * bar_filled}{'░' * (20 - bar_filled)}[/{color}]"
    console.print(f"\n  Completion: [bold]{pct:.1f}%[/bold] {bar} [{color}]{label}[/{color}]")
    console.print(f"  Learned: [bold]{stats.cards_learned}[/bold] of {stats.total_cards} "
                  f"(bucket ≥ {stats.learning_threshold})\n")

    table = Table(title="Cards by Bucket")
    table.add_column("Bucket", justify="right", style="cyan")
    table.add_column("Cards", justify="right")
    table.add_column("Due every", justify="right")
    for bucket, count in stats.cards_by_bucket.items():
        table.add_row(str(bucket), str(count), f"{bucket + 1} day(s)")
    console.print(table)

    bucket_range = get_bucket_range(state.get_buckets())
    if bucket_range:
        console.print(f"  [dim]Buckets in use: {bucket_range[0]}-{bucket_range[1]}[/dim]")


def cmd_history(state: FlashcardState):
    history = state.get_history()
    stats = get_review_stats(history)
    console.print(f"\n  Reviews: [bold]{stats['reviews']}[/bold]  |  "
                  f"Retention: [bold]{stats['retention_rate']}%[/bold]  |  "
                  f"Promotions: [bold]{stats['promotions']}[/bold]  |  "
                  f"Demotions: [bold]{stats['demotions']}[/bold]")
    if not history:
        return
    table = Table(title="Recent Reviews")
    table.add_column("When")
    table.add_column("Card", style="cyan")
    table.add_column("Answer")
    table.add_column("Bucket", justify="right")
    for record in history[-10:]:
        when = datetime.fromtimestamp(record.timestamp / 1000).strftime("%H:%M:%S")
        table.add_row(
            when, record.card_front, record.difficulty.name.title(),
            f"{record.previous_bucket} → {record.new_bucket}",
        )
    console.print(table)


def cmd_next(state: FlashcardState):
    day = advance_day(state)
    console.print(f"[green]Advanced to day {day}.[/green]")


def main():
    settings = load_settings()
    setup_logging(settings.log_level)
    state = create_seeded_state(seed=settings.seed)

    show_welcome()

    while True:
        show_menu(state.get_current_day())
        choice = Prompt.ask("\n[bold]>[/bold]", default="practice").strip().lower()
        try:
            if choice == "practice":
                cmd_practice(state)
            elif choice == "hint":
                cmd_hint(state)
            elif choice == "add":
                cmd_add(state)
            elif choice == "progress":
                cmd_progress(state, settings.learning_threshold)
            elif choice == "history":
                cmd_history(state)
            elif choice == "next":
                cmd_next(state)
            elif choice in ("quit", "exit", "q"):
                console.print("[dim]See you tomorrow![/dim]")
                break
            else:
                console.print("[red]Unknown command. Try again.[/red]")
        except KeyboardInterrupt:
            console.print("\n[dim]Use 'quit' to exit.[/dim]")
        except CardNotFoundError as e:
            console.print(f"[red]{e}[/red]")
        except ValueError as e:
            console.print(f"[red]Error: {e}[/red]")


if __name__ == "__main__":
    main()
