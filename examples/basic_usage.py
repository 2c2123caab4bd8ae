"""Walk through every roll the library offers.

Run with:  python examples/basic_usage.py
"""

from dice_roller import (
    roll_single,
    roll_with_advantage,
    roll_with_disadvantage,
    roll_with_modifier,
)


def main() -> None:
    print("=== Dice Roller Examples ===\n")

    print("Rolling 2d6+3 (two six-sided dice plus 3):")
    print(roll_with_modifier(2, 6, 3), end="\n\n")

    print("Rolling 3d8+5 (three eight-sided dice plus 5):")
    print(roll_with_modifier(3, 8, 5), end="\n\n")

    print("Rolling a d20:")
    print(f"d20: {roll_single(20)}\n")

    # Advantage and disadvantage (D&D 5e)
    print("Rolling d20 with advantage:")
    print(f"Result: {roll_with_advantage(20)}\n")

    print("Rolling d20 with disadvantage:")
    print(f"Result: {roll_with_disadvantage(20)}\n")

    print("Rolling 1d20-2:")
    print(roll_with_modifier(1, 20, -2))


if __name__ == "__main__":
    main()
