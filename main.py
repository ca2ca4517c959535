"""
User-Agent Classifier CLI

Provides a command-line interface with:
- Interactive classification of pasted User-Agent strings
- One-shot classification of command-line arguments
- Session statistics per device type
"""

import sys
from collections import Counter
from typing import List, Optional

from app.config import validate_config, LOG_LEVEL, LOG_FILE_PATH, ENABLE_FILE_LOGGING
from core.user_agent import UserAgent
from infra.logger import setup_logging, logger_api
from tools.schemas import DeviceInfo


# ═══════════════════════════════════════════════════════════════════════════════
# USER-AGENT PROCESSOR
# ═══════════════════════════════════════════════════════════════════════════════

class AgentProcessor:
    """
    Classifies User-Agent strings and keeps session counters.

    Counters:
    - total classified strings
    - per device type (mobile, tablet, desktop, bot, unknown)
    - bots, regardless of device type policy
    """

    def __init__(self, classifier: UserAgent):
        self.classifier = classifier
        self.session_total = 0
        self.session_bots = 0
        self.device_counts = Counter()


    def process(self, user_agent: str) -> DeviceInfo:
        """Classify one User-Agent and update the counters."""
        info = self.classifier.get_device_info(user_agent)

        self.session_total += 1
        self.device_counts[info.device_type] += 1
        if info.is_bot:
            self.session_bots += 1

        return info


    def get_session_stats(self) -> dict:
        """Get session statistics."""
        bot_rate = (self.session_bots / self.session_total * 100) if self.session_total > 0 else 0

        return {
            "total": self.session_total,
            "bots": self.session_bots,
            "bot_rate": bot_rate,
            "device_types": dict(self.device_counts),
        }


# ═══════════════════════════════════════════════════════════════════════════════
# CLI INTERFACE
# ═══════════════════════════════════════════════════════════════════════════════

class CLI:
    """
    Command-line interface for the classifier.

    Each input line is treated as a User-Agent string; the resulting
    DeviceInfo record is printed as JSON.
    """

    def __init__(self, processor: AgentProcessor):
        self.processor = processor


    def run(self):
        """Start interactive CLI session"""
        self._print_welcome()

        while True:
            try:
                line = self._get_input()

                if not line:
                    continue

                command = line.lower()

                if command in ('exit', 'quit', 'q'):
                    self._print_stats()
                    break

                if command in ('help', 'h', '?'):
                    self._print_help()
                    continue

                if command == "stats":
                    self._print_stats()
                    continue

                self._print_info(self.processor.process(line))

            except KeyboardInterrupt:
                print("\n")
                self._print_stats()
                break

            except Exception as e:
                print(f"\n❌ Error: {str(e)}\n")
                logger_api.error(f"CLI_ERROR | error={str(e)}")


    def run_once(self, user_agents: List[str]):
        """Classify the given strings and print each record"""
        for user_agent in user_agents:
            self._print_info(self.processor.process(user_agent))


    def _get_input(self) -> str:
        """Get user input with prompt"""
        try:
            return input("\nUser-Agent: ").strip()
        except EOFError:
            return "exit"


    def _print_info(self, info: DeviceInfo):
        print(info.model_dump_json(indent=2))


    def _print_welcome(self):
        """Print welcome message"""
        print("=" * 60)
        print("  User-Agent Classifier")
        print("=" * 60)
        print()
        print("  Paste a User-Agent string to classify it.")
        print("  Commands: help | stats | exit")
        print()


    def _print_help(self):
        """Print help message"""
        print()
        print("Available commands:")
        print("  help, h, ?  - Show this help message")
        print("  stats       - Show session statistics")
        print("  exit, quit  - Exit the application")
        print()
        print("Examples:")
        print('  Mozilla/5.0 (Linux; Android 13; SM-G998B) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/120.0.0.0 Mobile Safari/537.36')
        print('  Googlebot/2.1 (+http://www.google.com/bot.html)')
        print()


    def _print_stats(self):
        """Print session statistics"""
        stats = self.processor.get_session_stats()

        print("\n📊 Session Statistics:")
        print(f"  Classified: {stats['total']}")
        print(f"  Bots: {stats['bots']} ({stats['bot_rate']:.1f}%)")
        for device_type, count in sorted(stats['device_types'].items()):
            print(f"  {device_type}: {count}")
        print()


# ═══════════════════════════════════════════════════════════════════════════════
# MAIN ENTRY POINT
# ═══════════════════════════════════════════════════════════════════════════════

def main(argv: Optional[List[str]] = None):
    """
    Main entry point for the application.
    
    Sets up logging, validates configuration, then classifies the
    arguments or starts the interactive CLI when there are none.
    """
    args = sys.argv[1:] if argv is None else argv

    try:
        setup_logging(
            level=LOG_LEVEL,
            log_file=LOG_FILE_PATH if ENABLE_FILE_LOGGING else None
        )

        validate_config()
        logger_api.debug("Configuration valid [OK]")

        cli = CLI(AgentProcessor(UserAgent()))

        if args:
            cli.run_once(args)
        else:
            cli.run()

    except KeyboardInterrupt:
        print("\nInterrupted by user")
        sys.exit(0)

    except Exception as e:
        logger_api.error(f"STARTUP_ERROR | error={str(e)}")
        print(f"\n❌ Startup error: {str(e)}")
        sys.exit(1)


if __name__ == "__main__":
    main()
