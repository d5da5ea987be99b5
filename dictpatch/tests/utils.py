# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import copy
import json
import random
import string

import dictdiffer

from dictpatch import patch
from dictpatch.diff_format import is_valid_diff


def as_wire(diff):
    "Encode and decode a diff list through JSON, as done when crossing a process boundary."
    return json.loads(json.dumps(list(diff)))


def check_diff_and_patch(a, b):
    "Check that patch(diff(a, b), copy of a) reproduces b."
    d = as_wire(dictdiffer.diff(a, b))
    assert is_valid_diff(d)
    dest = copy.deepcopy(a)
    result = patch(d, dest)
    assert result is dest
    assert result == b


def check_symmetric_diff_and_patch(a, b):
    "Check that patch(diff(a, b), a) reproduces b and vice versa."
    check_diff_and_patch(a, b)
    check_diff_and_patch(b, a)


def random_key(rng):
    return "".join(rng.choice(string.ascii_lowercase) for _ in range(rng.randint(1, 3)))


def random_tree(rng, depth=3):
    "Generate a random JSON-like object of nested dicts, lists and scalars."
    kind = rng.random()
    if depth <= 0 or kind < 0.3:
        return rng.choice([None, True, False, rng.randint(-5, 5), random_key(rng)])
    if kind < 0.65:
        return [random_tree(rng, depth - 1) for _ in range(rng.randint(0, 4))]
    return {random_key(rng): random_tree(rng, depth - 1)
            for _ in range(rng.randint(0, 4))}


def mutate_tree(rng, obj):
    "Return a modified deep copy of obj, sharing most of its structure."
    obj = copy.deepcopy(obj)
    if isinstance(obj, dict):
        for k in list(obj):
            r = rng.random()
            if r < 0.2:
                del obj[k]
            elif r < 0.6:
                obj[k] = mutate_tree(rng, obj[k])
        for _ in range(rng.randint(0, 2)):
            obj[random_key(rng)] = random_tree(rng, 2)
        return obj
    elif isinstance(obj, list):
        obj = [mutate_tree(rng, v) if rng.random() < 0.5 else v for v in obj]
        r = rng.random()
        if r < 0.3 and obj:
            del obj[rng.randrange(len(obj)):]
        elif r < 0.6:
            obj.extend(random_tree(rng, 2) for _ in range(rng.randint(1, 3)))
        return obj
    return random_tree(rng, 2) if rng.random() < 0.5 else obj


def random_pair(seed):
    rng = random.Random(seed)
    a = {random_key(rng): random_tree(rng) for _ in range(rng.randint(1, 5))}
    return a, mutate_tree(rng, a)
