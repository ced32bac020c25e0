from simpledb.expressions import ConstantExpression, FieldExpression
from simpledb.schema import Schema


class FakeScan:
    def __init__(self, values):
        self.values = values

    def get_val(self, field):
        return self.values[field]

    def has_field(self, field):
        return field in self.values


def make_schema():
    schema = Schema()
    schema.add_int_field("A")
    schema.add_string_field("B", 10)
    return schema


def test_constant_evaluates_to_its_value():
    expr = ConstantExpression(100)
    assert expr.evaluate(FakeScan({"A": 1})) == 100
    assert expr.as_constant() == 100


def test_constant_applies_to_any_schema():
    assert ConstantExpression(1).can_apply(Schema()) is True
    assert ConstantExpression(1).can_apply(make_schema()) is True


def test_constant_string_form():
    assert str(ConstantExpression(100)) == "100"
    assert str(ConstantExpression("record")) == "record"


def test_field_evaluates_from_scan():
    scan = FakeScan({"A": 100, "B": "record"})
    assert FieldExpression("A").evaluate(scan) == 100
    assert FieldExpression("B").evaluate(scan) == "record"


def test_field_can_apply_only_when_schema_has_it():
    schema = make_schema()
    assert FieldExpression("A").can_apply(schema) is True
    assert FieldExpression("C").can_apply(schema) is False


def test_field_string_form():
    assert str(FieldExpression("A")) == "A"


def test_expressions_compare_by_value():
    assert FieldExpression("A") == FieldExpression("A")
    assert ConstantExpression(5) == ConstantExpression(5)
    assert ConstantExpression(5) != ConstantExpression(6)