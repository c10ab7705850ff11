import inquirer
from colorama import Fore
from inquirer import themes
from loguru import logger

from data.constants import PROJECT_NAME
from data.settings import Settings
from functions.benchmark import run_benchmark
from functions.convert import Convert, parse_payload_line
from libs.bech32 import Bech32Error, decode, encode
from libs.bech32.account import Account
from utils.create_files import create_files, reset_folder
from utils.logs import setup_logging
from utils.output import benchmark_table, console, decoded_table, show_banner

ACTIONS = [
    "1. Encode payload",
    "2. Decode string",
    "3. Derive address from ed25519 seed",
    "4. Decode strings from file",
    "5. Encode payloads from file",
    "6. Benchmark",
    "7. Reset files folder",
    "Exit",
]


def ask(message: str, default: str | None = None) -> str:
    answers = inquirer.prompt([inquirer.Text("value", message=Fore.LIGHTBLACK_EX + message, default=default)], theme=themes.Default())
    if answers is None:
        raise SystemExit(0)
    return answers["value"].strip()


def encode_payload() -> None:
    label = ask("Label", default=Settings().default_label)
    payload_hex = ask("Payload (hex)")
    bits = ask("Bit count (empty for all)", default="")
    line = f"{label}:{payload_hex}:{bits}" if bits else f"{label}:{payload_hex}"
    label, payload, bit_n = parse_payload_line(line)
    console.print(f"[bold green]{encode(label, payload, bit_n)}[/bold green]")


def decode_string() -> None:
    serial = ask("Bech32 string")
    console.print(decoded_table(serial, decode(serial)))


def derive_address() -> None:
    label = ask("Label", default=Settings().default_label)
    seed = ask("ed25519 seed (hex, empty for random)", default="")
    account = Account.from_private_hex(seed, label) if seed else Account.generate(label)
    console.print(f"public key: {account.public_key_hex()}")
    console.print(f"address:    [bold green]{account.address}[/bold green]")


def benchmark() -> None:
    console.print(benchmark_table(run_benchmark(Settings().benchmark_rounds)))


def choose_action() -> bool:
    question = [
        inquirer.List(
            "action",
            message=Fore.LIGHTBLACK_EX + "Choose action",
            choices=ACTIONS,
        )
    ]

    answers = inquirer.prompt(question, theme=themes.Default())
    action = answers["action"] if answers else "Exit"

    try:
        if action == "1. Encode payload":
            encode_payload()
        elif action == "2. Decode string":
            decode_string()
        elif action == "3. Derive address from ed25519 seed":
            derive_address()
        elif action == "4. Decode strings from file":
            console.print("[bold blue]Starting Decode strings from file[/bold blue]")
            Convert.strings_to_csv()
        elif action == "5. Encode payloads from file":
            console.print("[bold blue]Starting Encode payloads from file[/bold blue]")
            Convert.payloads_to_txt()
        elif action == "6. Benchmark":
            benchmark()
        elif action == "7. Reset files folder":
            console.print("This action will delete the files folder and reset it.")
            answer = input("Are you sure you want to perform this action? y/N ")
            if answer.lower() == "y":
                reset_folder()
                console.print("Files folder success reset")
        elif action == "Exit":
            console.print(f"[bold red]Exiting {PROJECT_NAME}...[/bold red]")
            return False
    except Bech32Error as e:
        console.print(str(e), style="bold red", markup=False)
    except ValueError as e:
        logger.error(f"{action} | {e}")

    return True


def main():
    create_files()
    setup_logging(Settings().log_level)
    show_banner(PROJECT_NAME)

    while choose_action():
        pass


if __name__ == "__main__":
    main()
