# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 ormreflect Rui Pinheiro

from . import property_namer
from .invoker import GetFieldInvoker, Invoker, MethodInvoker, SetFieldInvoker
from .meta_class import MetaClass
from .meta_object import NULL_META_OBJECT, MetaObject
from .object_factory import DEFAULT_OBJECT_FACTORY, DefaultObjectFactory, ObjectFactory
from .property_tokenizer import PropertyTokenizer
from .reflector import Reflector
from .reflector_factory import DEFAULT_REFLECTOR_FACTORY, DefaultReflectorFactory, ReflectorFactory, reflect
from .type_descriptors import ArrayType, GenericArrayType, ParameterizedType, TypeDescriptor, WildcardType, descriptor_of, to_class
from .type_parameter_resolver import resolve_field_type, resolve_param_types, resolve_return_type, resolve_type
from .wrapper import DEFAULT_OBJECT_WRAPPER_FACTORY, DefaultObjectWrapperFactory, ObjectWrapper, ObjectWrapperFactory, WrapperFactoryRegistry


__all__ = [
    "DEFAULT_OBJECT_FACTORY",
    "DEFAULT_OBJECT_WRAPPER_FACTORY",
    "DEFAULT_REFLECTOR_FACTORY",
    "NULL_META_OBJECT",
    "ArrayType",
    "DefaultObjectFactory",
    "DefaultObjectWrapperFactory",
    "DefaultReflectorFactory",
    "GenericArrayType",
    "GetFieldInvoker",
    "Invoker",
    "MetaClass",
    "MetaObject",
    "MethodInvoker",
    "ObjectFactory",
    "ObjectWrapper",
    "ObjectWrapperFactory",
    "ParameterizedType",
    "PropertyTokenizer",
    "Reflector",
    "ReflectorFactory",
    "SetFieldInvoker",
    "TypeDescriptor",
    "WildcardType",
    "WrapperFactoryRegistry",
    "descriptor_of",
    "property_namer",
    "reflect",
    "resolve_field_type",
    "resolve_param_types",
    "resolve_return_type",
    "resolve_type",
    "to_class",
]
