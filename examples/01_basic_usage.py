import logging

from intset import IntSet


def main():
    logging.basicConfig(level=logging.DEBUG)

    numbers = IntSet(capacity=1)
    for value in (4, 8, 15, 16, 23, 42, 8, 4):
        numbers.add(value)

    print("Size:", numbers.size())
    numbers.remove(15)
    print("Contains 15?", numbers.contains(15))
    print(numbers.statistics())


if __name__ == "__main__":
    main()
