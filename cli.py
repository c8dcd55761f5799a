#!/usr/bin/env python3
"""
py-treap CLI - Interactive Treap Playground
One TreapSet and one TreapMap to poke at from a prompt

Commands:
  ADD <key>              - Add a key to the set
  REM <key>              - Remove a key from the set
  MEMBER <key>           - Check set membership
  SET <key> <value>      - Bind a value to a key in the map
  GET <key> [default]    - Look up a key in the map
  DEL <key>              - Remove a key from the map
  HAS <key>              - Check whether the map holds a key
  STATS                  - Show sizes and heights
  RESET                  - Empty both structures
  DEMO                   - Run the example scenarios
  BENCH [n]              - Compare against sortedcontainers
  HELP                   - Show this help
  EXIT / QUIT            - Exit the CLI
"""

import sys
import readline  # enables arrow keys and command history
from pathlib import Path

# Add project to path
sys.path.insert(0, str(Path(__file__).parent))

import benchmark
from treap_map import TreapMap
from treap_set import TreapSet


KEY_TYPES = {"int": int, "str": str}


class CLI:
    """Interactive CLI over a TreapSet and a TreapMap"""

    PROMPT = "\033[1;36mpy-treap>\033[0m "  # Cyan colored prompt

    HELP_TEXT = """
\033[1;33m╔══════════════════════════════════════════════════════════════╗
║                    py-treap Playground CLI                   ║
╚══════════════════════════════════════════════════════════════╝\033[0m

\033[1;32mSet commands:\033[0m
  \033[1mADD\033[0m <key>            Add a key to the set
  \033[1mREM\033[0m <key>            Remove a key from the set
  \033[1mMEMBER\033[0m <key>         Check whether the set holds a key

\033[1;32mMap commands:\033[0m
  \033[1mSET\033[0m <key> <value>    Bind a value (overwrites an existing one)
  \033[1mGET\033[0m <key> [default]  Look up a value, or the default
  \033[1mDEL\033[0m <key>            Remove a binding
  \033[1mHAS\033[0m <key>            Check whether the map holds a key

\033[1;32mOther:\033[0m
  \033[1mSTATS\033[0m                Show sizes and heights
  \033[1mRESET\033[0m                Empty both structures
  \033[1mDEMO\033[0m                 Run the example scenarios
  \033[1mBENCH\033[0m [n]            Compare against sortedcontainers
  \033[1mCLEAR\033[0m                Clear the screen
  \033[1mHELP\033[0m                 Show this help message
  \033[1mEXIT\033[0m / \033[1mQUIT\033[0m          Exit

\033[1;32mExamples:\033[0m
  ADD 50
  SET 50 Alejandro
  GET 99 N/A
"""

    def __init__(self, seed=None, key_type="int"):
        self.seed = seed
        self.key_type = KEY_TYPES[key_type]
        self.treap_set = TreapSet(seed=seed)
        self.treap_map = TreapMap(seed=seed)
        self.running = True

    def print_banner(self):
        """Print welcome banner"""
        print("\033[1;35m")
        print("╔═══════════════════════════════════════════╗")
        print("║      py-treap: Randomized Search Trees    ║")
        print("║        Type 'HELP' for commands           ║")
        print("╚═══════════════════════════════════════════╝")
        print("\033[0m")

    def success(self, msg):
        """Print success message in green"""
        print(f"\033[1;32m{msg}\033[0m")

    def error(self, msg):
        """Print error message in red"""
        print(f"\033[1;31mError: {msg}\033[0m")

    def info(self, msg):
        """Print info message in yellow"""
        print(f"\033[1;33m{msg}\033[0m")

    def parse_key(self, raw):
        # ValueError for a bad int key is reported by process_command
        return self.key_type(raw)

    def cmd_add(self, args):
        """ADD <key>"""
        if len(args) < 1:
            self.error("Usage: ADD <key>")
            return

        if self.treap_set.insert(self.parse_key(args[0])):
            self.success("OK")
        else:
            self.info("(already a member)")

    def cmd_rem(self, args):
        """REM <key>"""
        if len(args) < 1:
            self.error("Usage: REM <key>")
            return

        if self.treap_set.remove(self.parse_key(args[0])):
            self.success("OK")
        else:
            self.info("(not a member)")

    def cmd_member(self, args):
        """MEMBER <key>"""
        if len(args) < 1:
            self.error("Usage: MEMBER <key>")
            return

        print("yes" if self.treap_set.member(self.parse_key(args[0])) else "no")

    def cmd_set(self, args):
        """SET <key> <value>"""
        if len(args) < 2:
            self.error("Usage: SET <key> <value>")
            return

        key = self.parse_key(args[0])
        value = " ".join(args[1:])  # Allow spaces in value
        if self.treap_map.insert(key, value):
            self.success("OK")
        else:
            self.success("OK (overwritten)")

    def cmd_get(self, args):
        """GET <key> [default]"""
        if len(args) < 1:
            self.error("Usage: GET <key> [default]")
            return

        key = self.parse_key(args[0])
        default = " ".join(args[1:]) if len(args) > 1 else None
        value = self.treap_map.find(key, default)

        if value is not None:
            print(f"\033[1;37m{value}\033[0m")
        else:
            self.info("(nil)")

    def cmd_del(self, args):
        """DEL <key>"""
        if len(args) < 1:
            self.error("Usage: DEL <key>")
            return

        if self.treap_map.remove(self.parse_key(args[0])):
            self.success("OK")
        else:
            self.info("(no such key)")

    def cmd_has(self, args):
        """HAS <key>"""
        if len(args) < 1:
            self.error("Usage: HAS <key>")
            return

        print("yes" if self.treap_map.contains(self.parse_key(args[0])) else "no")

    def cmd_stats(self, args):
        """STATS - Show sizes and heights"""
        print("\n\033[1;33m Treap Statistics\033[0m")
        print("─" * 35)
        print(f"  Set size:          {self.treap_set.size()}")
        print(f"  Set height:        {self.treap_set.height()}")
        print(f"  Map size:          {self.treap_map.size()}")
        print(f"  Map height:        {self.treap_map.height()}")
        print(f"  Key type:          {self.key_type.__name__}")
        print(f"  Seed:              {self.seed if self.seed is not None else '(random)'}")
        print()

    def cmd_reset(self, args):
        """RESET - Empty both structures"""
        self.treap_set.clear()
        self.treap_map.clear()
        self.success("Set and map cleared")

    def cmd_demo(self, args):
        """DEMO - Run the example scenarios on fresh structures"""
        print("\n\033[1;33m--- TreapSet (int keys) ---\033[0m")
        demo_set = TreapSet(seed=self.seed)
        for key in (50, 30, 70, 20):
            demo_set.insert(key)
        print("  insert 50, 30, 70, 20")
        print(f"  member(30)? {'yes' if demo_set.member(30) else 'no'}")
        print(f"  member(99)? {'yes' if demo_set.member(99) else 'no'}")
        print(f"  size(): {demo_set.size()}")
        demo_set.remove(30)
        print("  remove(30)")
        print(f"  member(30)? {'yes' if demo_set.member(30) else 'no'}")
        print(f"  size() after remove: {demo_set.size()}")

        print("\n\033[1;33m--- TreapMap (int -> str) ---\033[0m")
        demo_map = TreapMap(seed=self.seed)
        demo_map.insert(50, "Alejandro")
        demo_map.insert(30, "Beatriz")
        demo_map.insert(70, "Carlos")
        print("  insert (50, Alejandro), (30, Beatriz), (70, Carlos)")
        print(f"  find(30, 'N/A'): {demo_map.find(30, 'N/A')}")
        print(f"  find(99, 'N/A'): {demo_map.find(99, 'N/A')}")
        demo_map.insert(50, "Ana")
        print("  insert (50, Ana)")
        print(f"  find(50, 'N/A'): {demo_map.find(50, 'N/A')}")
        demo_map.remove(70)
        print("  remove(70)")
        print(f"  contains(70)? {'yes' if demo_map.contains(70) else 'no'}")
        print()

    def cmd_bench(self, args):
        """BENCH [n] - Compare against sortedcontainers"""
        n = int(args[0]) if args else 10_000
        if n <= 0:
            self.error("n must be positive")
            return
        benchmark.print_summary_table(benchmark.run(n, self.seed))

    def cmd_help(self, args):
        """HELP - Show help"""
        print(self.HELP_TEXT)

    def cmd_clear(self, args):
        """CLEAR - Clear screen"""
        print("\033[2J\033[H", end="")

    def cmd_exit(self, args):
        """EXIT - Exit CLI"""
        self.running = False
        print("\n\033[1;35mGoodbye! \033[0m\n")

    def process_command(self, line):
        """Process a single command"""
        line = line.strip()
        if not line:
            return

        parts = line.split(maxsplit=1)
        cmd = parts[0].upper()
        args = parts[1].split() if len(parts) > 1 else []

        # SET and GET keep the rest of the line intact as one value
        if cmd in ("SET", "GET") and len(parts) > 1:
            args = parts[1].split(maxsplit=1)

        commands = {
            "ADD": self.cmd_add,
            "REM": self.cmd_rem,
            "MEMBER": self.cmd_member,
            "SET": self.cmd_set,
            "GET": self.cmd_get,
            "DEL": self.cmd_del,
            "HAS": self.cmd_has,
            "STATS": self.cmd_stats,
            "RESET": self.cmd_reset,
            "DEMO": self.cmd_demo,
            "BENCH": self.cmd_bench,
            "HELP": self.cmd_help,
            "CLEAR": self.cmd_clear,
            "EXIT": self.cmd_exit,
            "QUIT": self.cmd_exit,
        }

        if cmd in commands:
            try:
                commands[cmd](args)
            except Exception as e:
                self.error(str(e))
        else:
            self.error(f"Unknown command: {cmd}. Type HELP for available commands.")

    def run(self):
        """Main REPL loop"""
        self.print_banner()

        while self.running:
            try:
                line = input(self.PROMPT)
                self.process_command(line)
            except KeyboardInterrupt:
                print("\n\033[1;33m(Use EXIT or QUIT to leave)\033[0m")
            except EOFError:
                self.cmd_exit([])


def main():
    """Entry point"""
    import argparse

    parser = argparse.ArgumentParser(
        description="py-treap: randomized search tree set and map"
    )
    parser.add_argument(
        "--seed", "-s",
        type=int,
        default=None,
        help="Seed for node priorities (default: OS entropy)"
    )
    parser.add_argument(
        "--key-type", "-k",
        choices=sorted(KEY_TYPES),
        default="int",
        help="How keys typed at the prompt are parsed (default: int)"
    )

    args = parser.parse_args()

    cli = CLI(seed=args.seed, key_type=args.key_type)
    cli.run()


if __name__ == "__main__":
    main()
