# kser

`kser` lets you treat some attributes of an ordinary object as *named fields*.
Once an attribute holds a field, you can read it, change it, visit it and
serialize it by name. Attributes that are not fields are left alone.

## Installation

```
pip install kser
```

To install with the test tools:

```
pip install "kser[test]"
```

## Declaring fields

Wrap an attribute's value in a `NamedField(name, value, value_type=None)`.
The field carries its name, its value and the type it holds. When
`value_type` is left out, it is the type of the initial value.

```python
from kser.fields import NamedField

class Player:
    def __init__(self):
        self.age = NamedField("age", 21)
        self.name = NamedField("name", "Aubrey")
        self.max_health = NamedField("max_health", 100.0)
        self.cur_health = 50.0   # a plain attribute, not a field
```

Fields are found in an object's `__slots__` and its instance attributes, in
declaration order. `named_fields(obj)` yields them; `is_field(obj)` tells
whether something is a field instance or a field class.

## Reading and writing by name

```python
from kser.fields import (
    FieldNotFound, TypeMismatch, get_field_with_name, get_value,
    get_value_strict, has_field, set_value, try_get_field_with_name,
    try_get_value,
)

p = Player()

has_field(p, "age")            # True
has_field(p, "cur_health")     # False: not a named field

get_value(p, "age", int)       # 21
get_value(p, "age", float)     # 21.0: numbers are converted
try_get_value(p, "meow", int)  # None

get_value_strict(p, "age", float)   # raises TypeMismatch
get_value(p, "meow", float)         # raises FieldNotFound

field = try_get_field_with_name(p, "age", int)
field.value = 23               # changes p.age

get_field_with_name(p, "meow", int) # raises FieldNotFound

set_value(p, "age", 22)        # True
set_value(p, "meow", 1)        # False: no such field
```

`set_value` raises `TypeMismatch` when the new value does not fit the field's
type. `FieldNotFound` is a `LookupError` and `TypeMismatch` a `TypeError`.

## Whole-object helpers

```python
from kser.fields import get_field_map, get_value_map, set_values

get_value_map(p)   # {"age": 22, "name": "Aubrey", "max_health": 100.0}
get_field_map(p)   # {"age": NamedField(...), ...}

set_values(p, {"age": 95, "name": "Bob"})   # returns 2, the number of fields set
```

`set_values` converts each incoming value to the type the field holds and
raises `TypeMismatch` when it cannot. Pass your own `caster`, called as
`caster(value_type, value)`, to change how values are converted.

## Visiting

```python
from kser.fields import visit_fields, visit_name_values, visit_values

visit_fields(p, lambda field: print(field.field_name(), field.value))
visit_name_values(p, lambda name, value: print(name, value))
visit_values(p, lambda value: print(value))
```

`visit_fields` and `visit_values` stop as soon as the visitor returns `True`;
`visit_name_values` stops on any truthy result.

## JSON

```python
from kser.serialize import serialize_json

serialize_json(p)
# {"age": 95, "name": "Bob", "max_health": 100.00}

serialize_json(10.5, precision=3)   # "10.500"
serialize_json("hello")             # "\"hello\""
```

Floating-point numbers are written with two decimals unless you pass another
`precision`. Objects nested inside fields are serialized as JSON objects;
field values that cannot be serialized are left out. An unsupported value at
the top level raises `TypeError`.

## What kser does not do

kser is a library only: it ships no command-line program, and it writes JSON
but does not read it back into objects.