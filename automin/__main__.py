#!/usr/bin/env python3
import sys
import argparse

from .errors import AutomatonError
from .model import MEALY, MOORE
from .minimize import minimize
from .table import read_csv, detect_kind, parse_mealy, parse_moore, save
from .visualize import save_dot

NAMES = {MEALY: "Мили", MOORE: "Мура"}

def make_parser():
    parser = argparse.ArgumentParser(prog='automin', description="Минимизация автомата Мили или Мура")
    parser.add_argument("kind", choices=[MEALY, MOORE], help="Тип автомата: mealy или moore")
    parser.add_argument("input_file", help="Имя входного CSV файла")
    parser.add_argument("output_file", help="Имя выходного CSV файла с минимизированным автоматом")
    parser.add_argument("--dot", metavar="FILE", help="Сохранить граф минимального автомата в формате DOT")
    parser.add_argument("-v", "--verbose", action="store_true", help="Печатать разбиение на каждом проходе")
    return parser

def main(argv=None):
    args = make_parser().parse_args(argv)
    try:
        rows = read_csv(args.input_file)
        file_kind = detect_kind(rows)
        if args.kind != file_kind:
            print(f"Предупреждение: указан тип {args.kind}, а файл похож на {file_kind}.")
        machine = parse_mealy(rows) if args.kind == MEALY else parse_moore(rows)
        minimized, _ = minimize(machine, report=print if args.verbose else None)
        save(minimized, args.output_file)
        if args.dot:
            save_dot(minimized, args.dot)
    except AutomatonError as e:
        print(f"Ошибка: {e}")
        return 1
    print(f"Минимизация автомата {NAMES[args.kind]} завершена: {len(machine)} -> {len(minimized)} состояний.")
    return 0

if __name__ == '__main__':
    sys.exit(main())
