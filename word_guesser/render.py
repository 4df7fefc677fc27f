from html import escape
from pathlib import Path
from typing import List, Optional

from .game import GameState, GuessResult, GuessStatus, MAX_GUESSES, WORD_LEN, get_letter_states

# --- Constants and Paths ---
ASSETS_DIR = Path(__file__).parent / 'assets'
TEMPLATE_PATH = ASSETS_DIR / 'template.html'
CSS_PATH = ASSETS_DIR / 'styles.css'
SCREENSHOTS_DIR = Path(__file__).parent.parent / 'logs'

HINT_LEGEND = "1=correct position, 0=wrong position, -=not in word"
HINT_CLASSES = {"1": "correct", "0": "present", "-": "absent"}

def colored(st, color: Optional[str], background=False): return f"\u001b[{10*background+60*(color.upper() == color)+30+['black', 'red', 'green', 'yellow', 'blue', 'magenta', 'cyan', 'white'].index(color.lower())}m{st}\u001b[0m" if color is not None else st


# --- Text-based UI Class ---
class TextUI:
    def __init__(self):
        self.status_icons = {
            GuessStatus.WON: "🎉",
            GuessStatus.CONTINUE: "🔄",
            GuessStatus.LOST: "😞",
            GuessStatus.ERROR: "❌",
        }

    def print_welcome(self, init_message: str):
        print(f"🎮 {init_message}")
        print(f"🎯 I've picked a {WORD_LEN}-letter word. Try to guess it!")
        print(f"💡 Hint format: {HINT_LEGEND}")
        print("-" * 50)

    def get_input(self, state: GameState) -> str:
        print(f"📝 Guesses remaining: {state.guesses_remaining}")
        return input(f"Enter your {WORD_LEN}-letter guess: ").strip()

    def print_result(self, result: GuessResult):
        if result.hint is not None:
            print(f"{'✅' if result.status is GuessStatus.WON else '💭'} Hint: {result.hint}")
        print(f"{self.status_icons[result.status]} {result.message}")

    def get_text_observation(self, state: GameState) -> str:
        return f"{self._get_board_string(state)}\n{self._get_letters_string(state)}"

    def print_game_over(self, state: GameState):
        print("\n" + "=" * 50)
        word = "".join(state.target_word or [])
        if state.won:
            print(colored(f"You guessed '{word}' in {state.turn} tries!", "green"))
        else:
            print(colored(f"Game over! The secret word was: {word}", "red"))
        print("=" * 50)

    def _get_board_string(self, state: GameState) -> str:
        edge = "=" * (WORD_LEN + 2)
        lines = [edge]
        for i in range(MAX_GUESSES):
            if i < state.turn:
                lines.append(f"|{state.guesses[i]}|")
                lines.append(f"|{state.hints[i]}|")
            else:
                lines.append(f"|{' ' * WORD_LEN}|")
                lines.append(f"|{' ' * WORD_LEN}|")

            if i < MAX_GUESSES - 1:
                lines.append("-" * (WORD_LEN + 2))
        lines.append(edge)
        return "\n".join(lines)

    def _get_letters_string(self, state: GameState) -> str:
        letter_states = get_letter_states(state)

        by_state = {name: sorted(k for k, v in letter_states.items() if v == name)
                    for name in ("correct", "present", "absent", "unused")}

        lines = ["\nLetters:"]
        lines.append(f"  Correct: {' '.join(by_state['correct'])}")
        lines.append(f"  Present: {' '.join(by_state['present'])}")
        lines.append(f"  Absent:  {' '.join(by_state['absent'])}")
        lines.append(f"  Unused:  {' '.join(by_state['unused'])}")
        return "\n".join(lines)


# --- Screenshot and HTML generation ---
def generate_html(state: GameState, status: Optional[str] = None) -> str:
    letter_states = get_letter_states(state)

    message_html = ''
    if status:
        message_html = f'<div class="status-message">{escape(status)}</div>'

    grid_html = ''
    for r in range(MAX_GUESSES):
        grid_html += '<div class="row">'
        if r < state.turn:
            guess, hint = state.guesses[r], state.hints[r]
            for c in range(WORD_LEN):
                grid_html += f'<div class="tile {HINT_CLASSES[hint[c]]} filled">{escape(guess[c].upper())}</div>'
        else:
            for _ in range(WORD_LEN): grid_html += '<div class="tile"></div>'
        grid_html += '</div>'

    keyboard_html = ''
    for row in ["qwertyuiop", "asdfghjkl", "zxcvbnm"]:
        keyboard_html += '<div class="keyboard-row">'
        for key in row:
            cls = letter_states.get(key, '')
            keyboard_html += f'<button class="key {cls}">{key.upper()}</button>'
        keyboard_html += '</div>'

    with open(TEMPLATE_PATH, 'r') as f: html_template = f.read()
    return html_template.format(grid_html=grid_html, keyboard_html=keyboard_html, message_html=message_html)


def render_board_screenshot(
    state: GameState,
    status: Optional[str] = None,
    output_path: Optional[Path] = None,
    work_dir: Optional[Path] = None,
) -> Optional[bytes]:
    """
    Renders the board as a PNG and returns its bytes.
    If output_path is provided, the image is also saved there. work_dir is
    where html2image writes its scratch file (logs/.temp by default).
    """
    try:
        from html2image import Html2Image
    except ImportError:
        print("\n[ERROR] html2image is not installed. To render images, run: 'pip install html2image'")
        return None

    work_dir = work_dir or SCREENSHOTS_DIR / ".temp"
    work_dir.mkdir(parents=True, exist_ok=True)

    hti = Html2Image(custom_flags=['--disable-gpu', '--no-sandbox', '--headless=new', '--log-level=3'], output_path=str(work_dir))
    shots: List[str] = hti.screenshot(
        html_str=generate_html(state, status),
        css_str=CSS_PATH.read_text(),
        save_as=f"board_turn_{state.turn}.png",
        size=(420, 640),
    )
    if not shots:
        return None

    # html2image always writes to its own output dir, move or drop the file afterwards
    shot = Path(shots[0])
    image_bytes = shot.read_bytes()
    if output_path:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        shot.replace(output_path)
    else:
        shot.unlink()

    return image_bytes
