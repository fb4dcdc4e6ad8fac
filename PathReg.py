# PathReg.py
import readline  # noqa: F401  (line editing + history for input())
from pathreg.core import init_core

def main():
    core = init_core()
    print("Path list REPL (name -> ordered, duplicate-free paths)")
    print("Commands: help (lists aliases).")
    print("Exit: quit/exit\n")

    try:
        while True:
            try:
                line = input("> ")
            except (EOFError, KeyboardInterrupt):
                print()
                break
            if line.strip() in ("quit", "exit"):
                break
            res = core.execute(line)
            if res is None:
                continue
            if isinstance(res, list):
                res = "\n".join(res)
            print(res)
    finally:
        core.close()
    return 0

if __name__ == "__main__":
    raise SystemExit(main())
