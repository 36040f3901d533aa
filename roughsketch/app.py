"""Application bootstrap for the roughsketch drawing board."""
from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional, Sequence

from PySide6.QtGui import QAction, QActionGroup
from PySide6.QtWidgets import QApplication, QLabel, QMainWindow, QStatusBar, QToolBar
from pydantic import ValidationError

from roughsketch.board import SketchBoard, Tool
from roughsketch.config import BoardConfig, ConfigError, load_config
from roughsketch.logging_config import configure_logging
from roughsketch.renderer import RoughGenerator
from roughsketch.widgets import Canvas

logger = logging.getLogger(__name__)

TOOL_DEFINITIONS = (
    ("line", "Line", "Line: drag to draw a straight stroke."),
    ("rectangle", "Rectangle", "Rectangle: drag from one corner to the opposite corner."),
    ("selection", "Selection", "Selection: drag a shape to move it."),
    ("none", "None", "No tool: pointer input is ignored."),
)


class Main(QMainWindow):
    """Top-level window wiring together the tool bar, canvas and status bar."""

    def __init__(self, config: BoardConfig):
        super().__init__()
        self.setWindowTitle("roughsketch")
        self.config = config

        generator = RoughGenerator(config.rough_options(), seed=config.seed)
        self.board = SketchBoard(generator, tool=config.default_tool)
        self.canvas = Canvas(self.board)
        self.setCentralWidget(self.canvas)

        self._tool_actions: dict[str, QAction] = {}
        self._setup_status_bar()
        self._make_toolbar()

        self.canvas.status_changed.connect(self._on_status_changed)
        self.resize(config.window_width, config.window_height)
        self._sync_tool_actions()
        self._on_status_changed(self.board.status())

    # ------------------------------------------------------------------
    # UI scaffolding
    def _setup_status_bar(self) -> None:
        bar = QStatusBar()
        bar.setSizeGripEnabled(False)
        self.setStatusBar(bar)
        self._status_labels = {
            "tool": QLabel("Tool: --"),
            "action": QLabel("Action: --"),
            "shapes": QLabel("Shapes: 0"),
        }
        for label in self._status_labels.values():
            bar.addPermanentWidget(label)

    def _make_toolbar(self) -> None:
        toolbar = QToolBar("Tools")
        toolbar.setMovable(False)
        self.addToolBar(toolbar)

        group = QActionGroup(self)
        group.setExclusive(True)
        for name, text, tip in TOOL_DEFINITIONS:
            action = QAction(text, self)
            action.setCheckable(True)
            action.setActionGroup(group)
            action.setToolTip(tip)
            action.setStatusTip(tip)
            action.triggered.connect(lambda checked, n=name: self._activate_tool(n, checked))
            toolbar.addAction(action)
            self._tool_actions[name] = action

    # ------------------------------------------------------------------
    # Event handlers
    def _activate_tool(self, name: str, checked: bool) -> None:
        if not checked:
            return
        self.canvas.set_tool(None if name == "none" else Tool(name))

    def _sync_tool_actions(self) -> None:
        current = self.board.status()["tool"]
        action = self._tool_actions.get(current)
        if action is None:
            return
        blocked = action.blockSignals(True)
        action.setChecked(True)
        action.blockSignals(blocked)

    def _on_status_changed(self, payload: dict) -> None:
        self._status_labels["tool"].setText(f"Tool: {str(payload.get('tool', '--')).title()}")
        self._status_labels["action"].setText(f"Action: {payload.get('action', '--')}")
        self._status_labels["shapes"].setText(f"Shapes: {payload.get('shapes', 0)}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="roughsketch", description="Hand-drawn line and rectangle sketch board.")
    parser.add_argument("--config", help="Path to a JSON config file (defaults to $ROUGHSKETCH_CONFIG).")
    parser.add_argument("--log-level", help="Override the configured log level.")
    parser.add_argument("--log-format", choices=("text", "json"), default="text")
    parser.add_argument("--tool", choices=[name for name, _, _ in TOOL_DEFINITIONS], help="Tool active at start-up.")
    parser.add_argument("--seed", type=int, help="Fix the stroke jitter seed.")
    return parser


def resolve_config(args: argparse.Namespace) -> BoardConfig:
    """Load the config file and apply command line overrides."""
    config = load_config(args.config)
    overrides = {}
    if args.log_level:
        overrides["log_level"] = args.log_level
    if args.tool:
        overrides["default_tool"] = None if args.tool == "none" else args.tool
    if args.seed is not None:
        overrides["seed"] = args.seed
    if overrides:
        try:
            config = BoardConfig(**{**config.model_dump(), **overrides})
        except ValidationError as exc:
            raise ConfigError(f"Invalid command line override: {exc}") from exc
    return config


def main(argv: Optional[Sequence[str]] = None) -> int:  # pragma: no cover - GUI entry point
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        config = resolve_config(args)
    except ConfigError as exc:
        parser.error(str(exc))
    configure_logging(config.log_level, args.log_format)
    logger.info("Starting roughsketch with tool %s", config.default_tool or "none")

    app = QApplication(sys.argv[:1])
    window = Main(config)
    window.show()
    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
