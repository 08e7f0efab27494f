"""Key state -> discrete actions, with DAS/ARR and soft-drop repeat"""
import enum
from typing import Dict, List, Mapping, Optional
from tetris_config import CONFIG

class Action(enum.Enum):
    MOVE_LEFT = "move_left"
    MOVE_RIGHT = "move_right"
    SOFT_DROP = "soft_drop"
    ROTATE_CW = "rotate_cw"
    ROTATE_CCW = "rotate_ccw"
    HOLD = "hold"
    TOGGLE_PAUSE = "toggle_pause"
    START = "start"
    RESTART = "restart"

# Tracked as held state; everything else is a one-shot request on press.
HELD_ACTIONS = (Action.MOVE_LEFT, Action.MOVE_RIGHT, Action.SOFT_DROP,
                Action.ROTATE_CW, Action.ROTATE_CCW, Action.HOLD)
REQUEST_ACTIONS = (Action.TOGGLE_PAUSE, Action.START, Action.RESTART)

# pygame.key.name() identifiers
KEYMAP: Dict[str, Action] = {
    "left": Action.MOVE_LEFT,
    "right": Action.MOVE_RIGHT,
    "down": Action.SOFT_DROP,
    "]": Action.ROTATE_CW,
    "up": Action.ROTATE_CW,
    "[": Action.ROTATE_CCW,
    "z": Action.ROTATE_CCW,
    "c": Action.HOLD,
    "space": Action.TOGGLE_PAUSE,
    "p": Action.TOGGLE_PAUSE,
    "return": Action.START,
    "r": Action.RESTART,
}


class InputController:
    """
    Event handlers only flip flags (set_key / set_action); update(dt) is the
    single place they are turned into game actions.

    • Rotation and hold fire on the press edge only.
    • Left/right move once on press, then after DAS_MS repeat every ARR_MS.
      Both held => no movement and both timers cleared.
    • Soft drop drops once on press, then every SOFT_DROP_MS.
    """
    def __init__(self, config: Optional[Mapping] = None, keymap: Optional[Mapping[str, Action]] = None):
        self.config = CONFIG if config is None else config
        self.keymap = dict(KEYMAP if keymap is None else keymap)
        self.keys = {a: False for a in HELD_ACTIONS}
        self.prev_keys = dict(self.keys)
        self.requests: List[Action] = []
        self.left_timer = 0.0
        self.right_timer = 0.0
        self.down_timer = 0.0

    def set_key(self, key_id, pressed: bool) -> bool:
        """Record a physical key change. Unknown identifiers are ignored (returns False)."""
        action = self.keymap.get(key_id)
        if action is None:
            return False
        self.set_action(action, pressed)
        return True

    def set_action(self, action: Action, pressed: bool):
        if action in REQUEST_ACTIONS:
            if pressed:
                self.requests.append(action)
            return
        self.keys[action] = bool(pressed)

    def pop_requests(self) -> List[Action]:
        out, self.requests = self.requests, []
        return out

    def reset(self):
        for a in HELD_ACTIONS:
            self.keys[a] = False
        self.prev_keys = dict(self.keys)
        self.requests = []
        self.left_timer = self.right_timer = self.down_timer = 0.0

    def _pressed(self, action: Action) -> bool:
        return self.keys[action] and not self.prev_keys[action]

    def update(self, dt: float) -> List[Action]:
        """Resolve this frame's key state into zero or more discrete actions."""
        try:
            return self._resolve(dt)
        finally:
            self.prev_keys = dict(self.keys)

    def _resolve(self, dt: float) -> List[Action]:
        out: List[Action] = []
        keys = self.keys

        if self._pressed(Action.ROTATE_CW): out.append(Action.ROTATE_CW)
        if self._pressed(Action.ROTATE_CCW): out.append(Action.ROTATE_CCW)

        # The active piece may change on hold; nothing else is resolved this frame.
        if self._pressed(Action.HOLD):
            out.append(Action.HOLD)
            return out

        das, arr = self.config["DAS_MS"], self.config["ARR_MS"]
        left, right = keys[Action.MOVE_LEFT], keys[Action.MOVE_RIGHT]
        if left and right:
            self.left_timer = self.right_timer = 0.0
        elif left:
            self.right_timer = 0.0
            self.left_timer = self._shift(Action.MOVE_LEFT, self.left_timer, dt, das, arr, out)
        elif right:
            self.left_timer = 0.0
            self.right_timer = self._shift(Action.MOVE_RIGHT, self.right_timer, dt, das, arr, out)
        else:
            self.left_timer = self.right_timer = 0.0

        if keys[Action.SOFT_DROP]:
            interval = self.config["SOFT_DROP_MS"]
            if self._pressed(Action.SOFT_DROP):
                out.append(Action.SOFT_DROP)
                self.down_timer = 0.0
            else:
                self.down_timer += dt
                # several drops per frame when dt is large
                while interval > 0 and self.down_timer > interval:
                    out.append(Action.SOFT_DROP)
                    self.down_timer -= interval
        else:
            self.down_timer = 0.0
        return out

    def _shift(self, action, timer, dt, das, arr, out) -> float:
        if self._pressed(action):
            out.append(action)
            return 0.0
        timer += dt
        if timer > das:
            if arr <= 0:
                # instant glide: one step per column, engine stops at the wall
                out.extend([action] * self.config["COLS"])
                return timer
            while timer > das + arr:
                out.append(action)
                timer -= arr
        return timer
