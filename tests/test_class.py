#
# Copyright (c) 2025, Brian Frank and Andy Frank
# Licensed under the Academic Free License version 3.0
#

import gc

import pytest

from superclass import ArgErr, Class, Instance, Object, createRootClass, defineClass


@pytest.fixture
def animals():
    Animal = Object.subclass("Animal")

    @Animal.defineMethod("initialize")
    def initialize(self, name):
        self.name = name

    Dog = Animal.subclass("Dog")
    return Animal, Dog


#########################################################################
# Creation
#########################################################################

def test_subclass_record(animals):
    Animal, Dog = animals
    assert isinstance(Dog, Class)
    assert Dog.name == "Dog"
    assert Dog.superclass is Animal
    assert Dog.super_ is Animal
    assert Object.superclass is None
    assert Dog.mixins == {}
    assert Dog.subclassList() == []
    assert str(Dog) == "class Dog"
    assert repr(Dog) == "class Dog"


def test_define_class_defaults_to_object():
    Thing = defineClass("Thing")
    assert Thing.superclass is Object
    Sub = defineClass("SubThing", Thing)
    assert Sub.superclass is Thing


@pytest.mark.parametrize("name", ["", None, 42, b"Bytes"])
def test_invalid_name(name):
    with pytest.raises(ArgErr):
        Object.subclass(name)
    with pytest.raises(ArgErr):
        defineClass(name)


def test_invalid_receiver():
    with pytest.raises(ArgErr):
        Object["subclass"]("not a class", "X")
    with pytest.raises(ArgErr):
        Object["new"](None)
    with pytest.raises(ArgErr):
        Object["allocate"]({})
    with pytest.raises(ArgErr):
        Object["include"](42, {})
    with pytest.raises(ArgErr):
        defineClass("X", "not a class")


def test_invalid_superclass():
    with pytest.raises(ArgErr):
        Class("X", superclass="Object")


def test_only_one_root():
    with pytest.raises(ArgErr):
        createRootClass("Another")


#########################################################################
# Construction
#########################################################################

def test_inherited_initializer_forwards_arguments(animals):
    Animal, Dog = animals
    rex = Dog.new("Rex")
    assert rex.name == "Rex"
    assert rex.class_ is Dog
    assert isinstance(rex, Instance)


def test_calling_class_constructs(animals):
    Animal, Dog = animals
    assert Dog("Rex").name == "Rex"
    assert Animal(name="Generic").name == "Generic"


def test_root_initialize_ignores_arguments():
    Plain = Object.subclass("Plain")
    obj = Plain.new(1, 2, key=3)
    assert obj.class_ is Plain


def test_own_initialize_overrides(animals):
    Animal, Dog = animals

    def initialize(self, name, breed):
        Animal["initialize"](self, name)
        self.breed = breed

    Dog["initialize"] = initialize
    rex = Dog.new("Rex", "collie")
    assert (rex.name, rex.breed) == ("Rex", "collie")


def test_allocate_skips_initialize(animals):
    Animal, Dog = animals
    bare = Dog.allocate()
    assert bare.class_ is Dog
    with pytest.raises(AttributeError):
        bare.name


def test_initialize_error_propagates(animals):
    Animal, Dog = animals

    def initialize(self, name):
        raise ValueError(f"bad name {name}")

    Dog["initialize"] = initialize
    with pytest.raises(ValueError, match="bad name Rex"):
        Dog.new("Rex")


def test_default_str(animals):
    Animal, Dog = animals
    assert str(Dog.new("Rex")) == "instance of class Dog"
    assert repr(Object.new()) == "instance of class Object"


#########################################################################
# Members
#########################################################################

def test_override_after_creation_is_not_shared(animals):
    Animal, Dog = animals
    Cat = Animal.subclass("Cat")
    Animal["sound"] = lambda self: "..."
    rex, tom, gen = Dog.new("Rex"), Cat.new("Tom"), Animal.new("Generic")
    assert rex.sound() == "..."

    Dog["sound"] = lambda self: "woof"
    assert rex.sound() == "woof"
    assert tom.sound() == "..."
    assert gen.sound() == "..."


def test_instance_field_shadows_class_member(animals):
    Animal, Dog = animals
    Animal["legs"] = 4
    rex = Dog.new("Rex")
    assert rex.legs == 4
    rex.legs = 3
    assert rex.legs == 3
    assert Dog.new("Fido").legs == 4


def test_missing_instance_member(animals):
    Animal, Dog = animals
    with pytest.raises(AttributeError, match="no member 'fly'"):
        Dog.new("Rex").fly()


def test_define_method_name_must_be_str(animals):
    Animal, Dog = animals
    with pytest.raises(ArgErr):
        Dog.defineMethod(3, lambda self: None)


def test_static_members_bind_to_receiver(animals):
    Animal, Dog = animals
    Animal.static["describe"] = lambda cls: f"the {cls.name} class"
    assert Animal.describe() == "the Animal class"
    assert Dog.describe() == "the Dog class"
    Dog.static["describe"] = lambda cls: "dogs"
    assert Dog.describe() == "dogs"
    assert Animal.describe() == "the Animal class"


def test_static_members_not_visible_on_instances(animals):
    Animal, Dog = animals
    Animal.static["population"] = 10
    assert Dog.population == 10
    with pytest.raises(AttributeError):
        Dog.new("Rex").population


def test_static_lookup_prefers_own_instance_member(animals):
    Animal, Dog = animals
    Animal.static["describe"] = lambda cls: "static"
    Dog["describe"] = lambda self: "instance"
    assert Dog["describe"](None) == "instance"
    assert Animal["describe"](None) == "static"


def test_static_lookup_prefers_ancestor_static_over_its_instance(animals):
    Animal, Dog = animals
    Animal.static["kind"] = "static kind"
    Animal["kind"] = "instance kind"
    assert Dog["kind"] == "static kind"
    assert Dog.new("Rex").kind == "instance kind"


def test_class_item_access(animals):
    Animal, Dog = animals
    assert "new" in Dog
    assert "fly" not in Dog
    with pytest.raises(KeyError):
        Dog["fly"]
    with pytest.raises(AttributeError):
        Dog.fly


#########################################################################
# Subclass registry
#########################################################################

def test_subclassed_hook_is_inherited():
    created = []
    Base = Object.subclass("Registry")
    Base.static["subclassed"] = lambda cls, other: created.append((cls.name, other.name))
    One = Base.subclass("One")
    One.subclass("Two")
    assert created == [("Registry", "One"), ("One", "Two")]


def test_subclass_registry(animals):
    Animal, Dog = animals
    Cat = Animal.subclass("Cat")
    assert set(Animal.subclassList()) == {Dog, Cat}
    assert Dog in Animal.subclasses
    assert Animal in Object.subclasses


def test_subclass_registry_is_weak():
    Base = Object.subclass("WeakBase")
    Base.subclass("WeakChild")
    gc.collect()
    assert len(Base.subclasses) == 0


def test_dropped_subclass_freed_without_cycle_collector():
    Base = Object.subclass("RefBase")
    enabled = gc.isenabled()
    gc.disable()
    try:
        Base.subclass("RefChild").include({"x": 1})
        assert len(Base.subclasses) == 0

        kept = Base.subclass("KeptChild")
        kept.new().x = 1
        assert len(Base.subclasses) == 1
        del kept
        assert len(Base.subclasses) == 0
    finally:
        if enabled:
            gc.enable()
