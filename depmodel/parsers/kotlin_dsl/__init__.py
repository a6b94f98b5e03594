"""Gradle Kotlin DSL build script reader."""

from .reader import read_kotlin_dsl

__all__ = ["read_kotlin_dsl"]
