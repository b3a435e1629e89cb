"""Command-line entrypoint for manual command validation."""

from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path
from typing import Sequence

from .config import load_config
from .gestures import classify_hand_landmarks
from .intent import result_to_debug
from .service import CommandInterpreter, help_text
from .state import CanvasState
from .types import ParameterState


def _parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Canvas command brain manual runner",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  python -m canvas_brain.cli --text \"make it red\"\n"
            "  python -m canvas_brain.cli --text \"brighter\" --state-json '{\"intensity\": 2.8, \"speed\": 1, \"particleCount\": 2000}' --apply\n"
            "  python -m canvas_brain.cli --gesture OPEN_HAND --apply --show-debug\n"
            "  python -m canvas_brain.cli --landmarks-json hand.json --apply\n"
        ),
    )
    parser.add_argument("--text", type=str, help="Typed phrase or voice transcript")
    parser.add_argument("--gesture", type=str, help="Gesture token, e.g. THUMBS_UP")
    parser.add_argument(
        "--landmarks-json",
        type=Path,
        help="JSON file holding 21 [x, y(, z)] hand landmarks",
    )
    parser.add_argument(
        "--state-json",
        type=str,
        help="Starting parameter state as a JSON object",
    )
    parser.add_argument(
        "--apply",
        action="store_true",
        help="Apply the resolved actions and print the resulting state",
    )
    parser.add_argument(
        "--show-debug",
        action="store_true",
        help="Print debug info even when debug config is off",
    )
    parser.add_argument(
        "--list-gestures",
        action="store_true",
        help="Print the gesture table and exit",
    )
    parser.add_argument(
        "--commands",
        action="store_true",
        help="Print the command cheat-sheet and exit",
    )
    return parser.parse_args(argv)


def _initial_state(raw: str | None) -> ParameterState:
    if not raw:
        return ParameterState()
    try:
        payload = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise SystemExit(f"--state-json is not valid JSON: {exc}") from exc
    if not isinstance(payload, dict):
        raise SystemExit("--state-json must be a JSON object")
    try:
        return ParameterState.from_mapping(payload)
    except KeyError as exc:
        raise SystemExit(f"--state-json is missing {exc.args[0]!r}") from exc


def main(argv: Sequence[str] | None = None) -> None:
    args = _parse_args(argv)
    cfg = load_config()
    debug = cfg.debug or args.show_debug
    logging.basicConfig(level=logging.DEBUG if debug else logging.WARNING)

    if args.commands:
        print(help_text())
        return

    interpreter = CommandInterpreter(cfg=cfg)

    if args.list_gestures:
        for token, phrase in interpreter.lexicon.gestures.items():
            print(f"{token}: {phrase}")
        return

    source = "text"
    if args.text is not None:
        command = args.text
    elif args.gesture:
        command = args.gesture
        source = "gesture"
    elif args.landmarks_json is not None:
        landmarks = json.loads(args.landmarks_json.read_text(encoding="utf-8"))
        token = classify_hand_landmarks(landmarks)
        if token is None:
            raise SystemExit("No gesture recognized in landmarks")
        print(f"gesture={token}")
        command = token
        source = "gesture"
    else:
        raise SystemExit("Provide --text, --gesture or --landmarks-json")

    store = CanvasState(_initial_state(args.state_json))
    if args.apply:
        result = interpreter.handle(command, store, source=source)
    else:
        result = interpreter.interpret(command, store.snapshot(), source=source)

    print(result.response_text)
    print(f"understood={result.understood} confidence={result.confidence:.2f}")
    for action in result.actions:
        print(f"  {action.type}: {action.key} ({action.description})")
    if args.apply:
        print(f"state={json.dumps(store.snapshot().to_dict())}")
    if debug:
        print(f"debug={json.dumps(result_to_debug(result), indent=2)}")


if __name__ == "__main__":
    main()
