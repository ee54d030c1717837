"""Command-line entrypoint: python -m aifacade {text,chat,image} PROMPT."""
import argparse
import sys

from aifacade.client import AIClient
from aifacade.config import ClientSettings
from aifacade.exceptions import AIFacadeError
from aifacade.logging import configure_logging


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="aifacade")
    parser.add_argument("mode", choices=["text", "chat", "image"])
    parser.add_argument("prompt")
    args = parser.parse_args(argv)

    settings = ClientSettings()
    configure_logging(json_logs=settings.json_logs, stream=sys.stderr)
    try:
        with AIClient.from_settings(settings) as client:
            if args.mode == "text":
                out = client.generate_text(args.prompt)
            elif args.mode == "image":
                out = client.generate_image(args.prompt)
            else:
                out = client.chat(args.prompt)
    except AIFacadeError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1
    print(out)
    return 0


if __name__ == "__main__":
    sys.exit(main())
