import logging
from app.cmd.demo import demo


def logging_conf() -> None:
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s - %(message)s",
    )

def main() -> None:
    logging_conf()
    demo()

if __name__ == "__main__":
    main()
