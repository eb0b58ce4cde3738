from rich.console import Console
from rich.markup import escape
from rich.pretty import pprint
from enum import IntEnum

class LOG_LEVELS(IntEnum):
    BASIC = 0
    SIMPLE = 1
    COMPLEX = 2

console = Console()
errorConsole = Console(stderr=True)

logLevel = LOG_LEVELS.BASIC
def setLogLevel(level: LOG_LEVELS):
    global logLevel
    logLevel = level

def log(msg, level = LOG_LEVELS.BASIC, prettyPrint = False, end= "\n", **options):
    """Prints rich markup (or pretty-prints an object) when the current level allows it."""
    if logLevel < level:
        return
    if prettyPrint:
        pprint(msg, console=console, **options)
    else:
        console.print(msg, end=end)

# errors are always shown, whatever the level
def logError(msg):
    errorConsole.print(f"[bold red]✗[/] [red]{escape(str(msg))}")
