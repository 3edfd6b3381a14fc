import sys
from typing import Optional
from app.cli.action_loop import ActionLoop
from app.cli.prompts import Prompter
from app.config import settings
from app.exceptions import RosterPersistError
from app.store.roster_store import RosterStore
from app.utils.logger import setup_logging


def run(prompter: Optional[Prompter] = None, store: Optional[RosterStore] = None) -> int:
    """Run the interactive roster and return the process exit code."""
    logger = setup_logging()
    prompter = prompter or Prompter()
    loop = ActionLoop(store or RosterStore(settings.data_file), prompter)

    try:
        loop.run()
    except RosterPersistError as e:
        logger.critical("Aborting after failed save: %s", e.message)
        prompter.error(f"Error: {e.message}")
        return 1
    except KeyboardInterrupt:
        prompter.say()
        prompter.banner("Goodbye!")
        return 130
    except EOFError:
        prompter.say()
        prompter.banner("Goodbye!")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(run())
