"""
文本界面

在终端里下棋的命令行：
- show: 显示布局
- layouts: 列出所有布局
- play: 从标准输入读取记谱走棋

## 使用示例

```bash
python -m cchess.console show --layout official
python -m cchess.console play --layout 1-horse-handicap
```

play 中除了六位记谱，还可以输入 undo / draw / resign / quit
"""

from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from cchess.errors import LayoutError
from cchess.game import DRAW, Game
from cchess.layouts import DEFAULT_LAYOUT_NAME, get_layout, list_layouts
from cchess.logging import configure_logging
from cchess.types import MoveStatus

console = Console()
app = typer.Typer(help="Xiangqi rules engine - plain text board")


def show_board(game: Game) -> None:
    """打印棋盘和当前走棋方"""
    console.print(escape(str(game)), highlight=False)
    console.print(f"Current Player: {int(game.get_current_player())}")


def show_finish(game: Game) -> None:
    winner = game.get_winner()
    if winner == DRAW:
        console.print("[bold]It is a draw![/bold]")
    else:
        console.print(f"[bold]The winner is {int(winner)}![/bold]")


def show_status(status: MoveStatus, notation: str) -> None:
    """走棋结果提示"""
    if status == MoveStatus.REJECTED:
        displayed = notation.upper() if notation else "empty"
        console.print(f"[red]Move {escape(f'[{displayed}]')} is not accepted[/red]")
    elif status == MoveStatus.CAPTURE:
        console.print("[yellow]Capture![/yellow]")
    elif status == MoveStatus.CHECK:
        console.print("[yellow]Check![/yellow]")


@app.command()
def show(
    layout: str = typer.Option(DEFAULT_LAYOUT_NAME, "--layout", "-l", help="布局名"),
    layouts_path: Path | None = typer.Option(None, "--layouts", help="布局文件 (JSON)"),
) -> None:
    """显示布局"""
    try:
        game = Game(get_layout(layout, layouts_path))
    except LayoutError as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        raise typer.Exit(1) from None
    console.print(escape(str(game)), highlight=False)


@app.command(name="layouts")
def layouts_command(
    layouts_path: Path | None = typer.Option(None, "--layouts", help="布局文件 (JSON)"),
) -> None:
    """列出所有布局"""
    try:
        names = list_layouts(layouts_path)
    except LayoutError as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        raise typer.Exit(1) from None

    table = Table(title="Available Layouts")
    table.add_column("Name")
    for name in names:
        table.add_row(name)
    console.print(table)


@app.command()
def play(
    layout: str = typer.Option(DEFAULT_LAYOUT_NAME, "--layout", "-l", help="布局名"),
    layouts_path: Path | None = typer.Option(None, "--layouts", help="布局文件 (JSON)"),
    log_level: str = typer.Option("WARNING", "--log-level", help="日志级别"),
) -> None:
    """在终端里下棋"""
    configure_logging(log_level)
    game = Game.from_layout_name(layout, layouts_path)
    show_board(game)

    while not game.is_game_over():
        try:
            text = console.input("Next Move: ").strip()
        except EOFError:
            break

        command = text.lower()
        if command == "quit":
            break
        if command == "undo":
            if game.recall_move():
                show_board(game)
                console.print("Move recalled!")
            else:
                console.print("There is no reverse available.")
        elif command == "draw":
            game.draw()
        elif command == "resign":
            game.resign()
        else:
            status = game.make_move(text)
            if status != MoveStatus.REJECTED:
                show_board(game)
            show_status(status, text)

    if game.is_game_over():
        show_finish(game)


if __name__ == "__main__":
    app()
