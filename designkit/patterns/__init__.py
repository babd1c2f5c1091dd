"""Creational pattern lessons: factory, abstract factory, singleton, builder."""
