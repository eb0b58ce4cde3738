from click import Abort
import questionary
from rich.markup import escape

from caselib.constants import CASE_STYLES
from caselib.logger import LOG_LEVELS, log, logError
from caselib.string_utils import ConversionResult, tryConvert

from typing import List, Optional

def chooseStyle(default: Optional[str] = None) -> str:
    answer = questionary.select(
        "Which case should strings be converted to?",
        choices=list(CASE_STYLES),
        default=default if default in CASE_STYLES else None
    ).ask()

    # user quit prompt
    if answer is None:
        raise Abort
    return answer

def interactiveConvert(defaultStyle: Optional[str] = None) -> List[ConversionResult]:
    style = chooseStyle(defaultStyle)
    log(f"[bold]Converting to [deep_sky_blue1]<{style}>[/] case, leave the text empty to stop")

    results: List[ConversionResult] = []
    while True:
        answer = questionary.text("Text to convert:").ask()

        if answer is None:
            raise Abort
        # a blank answer ends the session rather than being reported as invalid
        if answer == "":
            break

        result = tryConvert(style, answer)
        results.append(result)
        if result.ok:
            log(f"[bright_green]{escape(result.value)}")
        else:
            logError(result.error)
            log(f"cause: {result.error.cause.name}", LOG_LEVELS.COMPLEX)

    log(f"\nConverted {sum(1 for r in results if r.ok)} of {len(results)} strings", LOG_LEVELS.SIMPLE)
    return results
