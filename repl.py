import logging

from pocketcalc.config import Config
from pocketcalc.session import CalculatorSession

COMMANDS = {
    "c": CalculatorSession.clear,
    "d": CalculatorSession.delete,
}


if __name__ == "__main__":
    config = Config.from_env()
    logging.basicConfig(
        level=config.log_level,
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
    )
    session = CalculatorSession(config)

    print("Type keys and press Enter; '=' evaluates, 'c' clears, 'd' deletes the last character")
    while True:
        try:
            line = input("> ")
        except EOFError:
            break

        command = line.strip()
        if command in COMMANDS:
            COMMANDS[command](session)
        elif command == "=":
            session.equals()
        else:
            for key in line:
                if key == "=":
                    session.equals()
                elif not key.isspace():
                    session.press(key)

        print(session.display)
