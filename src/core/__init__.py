"""
Core arbitrary-precision integer arithmetic.

bigint    — представление (DigitVector), UBI/SBI, radix-кодек, конверсии
math      — числовые трейты, модульная арифметика, целочисленные корни
domain    — wire-модели (pydantic)
contracts — JSON Schema контракты и сериализационный кодек
"""
