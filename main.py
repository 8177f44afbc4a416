from inventory_manager import cli
from inventory_manager.logger import setup_logger


def run_process():
    """Entry point: set up logging, load saved data and start the menu."""
    setup_logger()
    print("Running in STANDALONE mode (In-Memory + CSV Persistence)")
    cli.run()


if __name__ == "__main__":
    run_process()
