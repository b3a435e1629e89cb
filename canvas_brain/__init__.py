"""Public API for the canvas command brain."""

from .cache import InterpretationCache
from .config import CanvasBrainConfig, load_config
from .dispatcher import CommandDispatcher, DispatcherSnapshot
from .executor import apply_action, execute_actions
from .gestures import GESTURE_TOKENS, classify_hand_landmarks
from .intent import ContextSignals, InterpretationResult, MatchResult, result_to_debug
from .lang import Lexicon, LexiconError, PatternEntry, default_lexicon, load_lexicon
from .logging_utils import append_event, ensure_log_dir
from .resolver import build_hint, match_categories, resolve_actions
from .service import CommandInterpreter, execute, help_text, interpret
from .state import CanvasState
from .types import Action, MoodPreset, ParameterMutators, ParameterState

__all__ = [
    "Action",
    "CanvasBrainConfig",
    "CanvasState",
    "CommandDispatcher",
    "CommandInterpreter",
    "ContextSignals",
    "DispatcherSnapshot",
    "GESTURE_TOKENS",
    "InterpretationCache",
    "InterpretationResult",
    "Lexicon",
    "LexiconError",
    "MatchResult",
    "MoodPreset",
    "ParameterMutators",
    "ParameterState",
    "PatternEntry",
    "append_event",
    "apply_action",
    "build_hint",
    "classify_hand_landmarks",
    "default_lexicon",
    "ensure_log_dir",
    "execute",
    "execute_actions",
    "help_text",
    "interpret",
    "load_config",
    "load_lexicon",
    "match_categories",
    "resolve_actions",
    "result_to_debug",
]
