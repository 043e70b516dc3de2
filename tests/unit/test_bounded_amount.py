"""
Тесты для BoundedAmount

Проверяет:
1. Создание и валидацию инварианта value >= 0
2. reduce() с clamp к нулю
3. Immutability (frozen=True) и равенство по значению
4. Сериализацию/десериализацию через контракт bounded_amount.json
"""

from concurrent.futures import ThreadPoolExecutor

import pytest
from pydantic import ValidationError

from immutable_values import BoundedAmount, InvalidArgument, ValueObjectError


class TestBoundedAmountCreate:
    """Тесты создания BoundedAmount"""

    @pytest.mark.parametrize("value", [0, 1, 7, 100, 10**18])
    def test_create_keeps_value(self, value: int) -> None:
        """Для любого v >= 0 create(v).value == v"""
        assert BoundedAmount.create(value).value == value

    @pytest.mark.parametrize("value", [-1, -7, -(10**18)])
    def test_create_negative_rejected(self, value: int) -> None:
        """Для любого v < 0 create(v) поднимает InvalidArgument"""
        with pytest.raises(InvalidArgument, match=">= 0") as exc_info:
            BoundedAmount.create(value)
        assert exc_info.value.field == "value"
        assert exc_info.value.value == value

    def test_scenario_create_minus_one(self) -> None:
        """Сценарий 3: create(-1) → InvalidArgument"""
        with pytest.raises(InvalidArgument):
            BoundedAmount.create(-1)

    def test_invalid_argument_is_value_error(self) -> None:
        """InvalidArgument ловится как ValueError и как ValueObjectError"""
        with pytest.raises(ValueError):
            BoundedAmount.create(-1)
        with pytest.raises(ValueObjectError):
            BoundedAmount.create(-1)

    @pytest.mark.parametrize("value", [True, 1.0, "5", None])
    def test_create_non_integer_rejected(self, value: object) -> None:
        """bool, float, строки и None не являются integer"""
        with pytest.raises(InvalidArgument) as exc_info:
            BoundedAmount.create(value)  # type: ignore[arg-type]
        assert exc_info.value.field == "value"

    def test_direct_construction_guarded(self) -> None:
        """Прямой конструктор тоже проверяет инвариант (pydantic ValidationError)"""
        with pytest.raises(ValidationError):
            BoundedAmount(value=-1)


class TestBoundedAmountReduce:
    """Тесты reduce()"""

    def test_scenario_reduce_basic(self) -> None:
        """Сценарий 1: create(10).reduce(3) → 7"""
        assert BoundedAmount.create(10).reduce(3).value == 7

    def test_scenario_reduce_clamped(self) -> None:
        """Сценарий 2: create(5).reduce(9) → 0 (clamp)"""
        result = BoundedAmount.create(5).reduce(9)
        assert result.value == 0
        assert result.is_depleted()

    @pytest.mark.parametrize(
        "start, delta",
        [
            (0, 0),
            (0, 5),
            (10, 10),
            (10, 11),
            (10, -4),
            (3, -(10**12)),
            (10**12, 1),
        ],
    )
    def test_reduce_formula(self, start: int, delta: int) -> None:
        """reduce(d).value == max(0, value - d) для любого integer d"""
        assert BoundedAmount.create(start).reduce(delta).value == max(0, start - delta)

    def test_reduce_zero_returns_equal_new_instance(self) -> None:
        """reduce(0) возвращает новый экземпляр, равный по значению"""
        original = BoundedAmount.create(42)
        result = original.reduce(0)
        assert result == original
        assert result is not original

    def test_reduce_does_not_mutate_receiver(self) -> None:
        """Исходный экземпляр не изменяется"""
        original = BoundedAmount.create(10)
        original.reduce(3)
        original.reduce(100)
        assert original.value == 10

    @pytest.mark.parametrize("start, d1, d2", [(10, 3, 4), (10, 0, 10), (100, 50, 25)])
    def test_reduce_additive_without_clamp(self, start: int, d1: int, d2: int) -> None:
        """Без clamp: reduce(d1).reduce(d2) == reduce(d1 + d2)"""
        b = BoundedAmount.create(start)
        assert b.reduce(d1).reduce(d2).value == b.reduce(d1 + d2).value

    def test_reduce_non_integer_rejected(self) -> None:
        """Нецелый amount отклоняется"""
        with pytest.raises(InvalidArgument, match="integer") as exc_info:
            BoundedAmount.create(10).reduce(1.5)  # type: ignore[arg-type]
        assert exc_info.value.field == "amount"


class TestBoundedAmountImmutability:
    """Тесты immutability и value-семантики"""

    def test_assignment_rejected(self) -> None:
        """BoundedAmount должен быть immutable (frozen=True)"""
        b = BoundedAmount.create(10)
        with pytest.raises(ValidationError):
            b.value = 1  # type: ignore[misc]
        assert b.value == 10

    def test_equality_and_hash_by_value(self) -> None:
        """Равенство и hash по значению"""
        assert BoundedAmount.create(5) == BoundedAmount.create(5)
        assert BoundedAmount.create(5) != BoundedAmount.create(6)
        assert len({BoundedAmount.create(5), BoundedAmount.create(5)}) == 1

    def test_str(self) -> None:
        assert str(BoundedAmount.create(7)) == "7"

    def test_concurrent_reads(self) -> None:
        """Параллельные чтения и reduce() из разных потоков не меняют общий экземпляр"""
        shared = BoundedAmount.create(1000)

        with ThreadPoolExecutor(max_workers=8) as pool:
            results = list(pool.map(shared.reduce, range(100)))

        assert shared.value == 1000
        assert [r.value for r in results] == [1000 - d for d in range(100)]


class TestBoundedAmountSerialization:
    """Тесты to_dict/from_dict"""

    def test_to_dict(self) -> None:
        assert BoundedAmount.create(7).to_dict() == {"value": 7}

    def test_from_dict(self) -> None:
        assert BoundedAmount.from_dict({"value": 7}) == BoundedAmount.create(7)

    def test_from_dict_negative_rejected(self) -> None:
        """Отрицательное значение отклоняется контрактом"""
        with pytest.raises(InvalidArgument, match="bounded_amount contract") as exc_info:
            BoundedAmount.from_dict({"value": -1})
        assert exc_info.value.field == "value"

    @pytest.mark.parametrize(
        "payload",
        [{}, {"value": "7"}, {"value": 7, "extra": 1}, {"value": True}],
    )
    def test_from_dict_contract_violations(self, payload: dict) -> None:
        """Нарушения контракта (required, type, additionalProperties)"""
        with pytest.raises(InvalidArgument, match="bounded_amount contract"):
            BoundedAmount.from_dict(payload)

    def test_from_dict_integral_float_rejected(self) -> None:
        """7.0 проходит JSON Schema 'integer', но не strict-проверку модели"""
        with pytest.raises(InvalidArgument) as exc_info:
            BoundedAmount.from_dict({"value": 7.0})
        assert exc_info.value.field == "value"
