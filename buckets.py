from collections import namedtuple


# A key-value pair handed back by removals and iteration.
Pair = namedtuple("Pair", ["key", "value"])


# Mapping equality shared by every map type in this project: same number of pairs
# and every pair of one found in the other. O(n) for hashed maps, O(n^2) for linear ones.
def maps_equal(first, second):
    if first.size() != second.size():
        return False
    for pair in first:
        if not second.has_key(pair.key) or second.value(pair.key) != pair.value:
            return False
    return True


# Formats any map as {(k, v), (k, v)} in its own iteration order. O(n)
def format_map(pairs):
    return "{" + ", ".join("(" + repr(k) + ", " + repr(v) + ")" for k, v in pairs) + "}"


class FixedArray(object):
    # A 0-indexed array whose length is fixed at creation. Each slot is filled by calling
    # factory once, so slots never share a mutable object. O(n) to initialize.
    def __init__(self, length, factory=None):
        if not isinstance(length, int) or isinstance(length, bool) or length <= 0:
            raise ValueError("length must be a positive integer, got " + repr(length))
        self.entries = [factory() if factory is not None else None for _ in range(length)]

    # Number of slots, which never changes. O(1)
    def __len__(self):
        return len(self.entries)

    def __iter__(self):
        return iter(self.entries)

    def __getitem__(self, index):
        return self.entry(index)

    def __setitem__(self, index, value):
        self.set_entry(index, value)

    # Negative indices are rejected rather than counted from the end. O(1)
    def check_index(self, index):
        if not 0 <= index < len(self.entries):
            raise IndexError("index " + repr(index) + " out of range for length " + str(len(self.entries)))

    def entry(self, index):
        self.check_index(index)
        return self.entries[index]

    def set_entry(self, index, value):
        self.check_index(index)
        self.entries[index] = value

    def length(self):
        return len(self.entries)


class LinearMap(object):
    # A small unordered map kept as a list of [key, value] entries, used for the buckets
    # of a ChainedHashMap. Lookups are linear in the number of entries, which stays small
    # when keys are spread over enough buckets. O(1) to initialize.
    def __init__(self):
        self.entries = []

    def __len__(self):
        return len(self.entries)

    def __iter__(self):
        return LinearMapIterator(self)

    def __contains__(self, key):
        return self.has_key(key)

    def __getitem__(self, key):
        return self.value(key)

    def __eq__(self, other):
        if not hasattr(other, "size") or not hasattr(other, "has_key"):
            return NotImplemented
        return maps_equal(self, other)

    __hash__ = None

    def __repr__(self):
        return format_map(self)

    # Position of key in the entry list, or -1 when absent. O(n)
    def find(self, key):
        for i in range(len(self.entries)):
            if self.entries[i][0] == key:
                return i
        return -1

    # Adds a pair whose key is not already present. O(n) because of the duplicate check.
    def add(self, key, value):
        if key is None or value is None:
            raise ValueError("key and value must not be None")
        if self.find(key) >= 0:
            raise KeyError(key)
        self.entries.append([key, value])

    # Removes the pair with the given key and returns it. O(n)
    def remove(self, key):
        index = self.find(key)
        if index < 0:
            raise KeyError(key)
        entry = self.entries.pop(index)
        return Pair(entry[0], entry[1])

    # Removes the most recently added pair. O(1)
    def remove_any(self):
        if not self.entries:
            raise KeyError("remove_any(): map is empty")
        entry = self.entries.pop()
        return Pair(entry[0], entry[1])

    def value(self, key):
        index = self.find(key)
        if index < 0:
            raise KeyError(key)
        return self.entries[index][1]

    def has_key(self, key):
        return self.find(key) >= 0

    def size(self):
        return len(self.entries)

    def clear(self):
        self.entries = []

    # Takes over the entries of another LinearMap and leaves it empty. O(1)
    def transfer_from(self, other):
        if not isinstance(other, LinearMap):
            raise TypeError("cannot transfer from " + type(other).__name__)
        if other is self:
            raise ValueError("cannot transfer a map into itself")
        self.entries = other.entries
        other.entries = []


class LinearMapIterator(object):
    # Walks the entries of a LinearMap in insertion order. O(1) to initialize.
    def __init__(self, linear_map):
        self.index = 0
        self.entries = linear_map.entries

    def __iter__(self):
        return self

    def __next__(self):
        if self.index >= len(self.entries):
            raise StopIteration
        entry = self.entries[self.index]
        self.index += 1
        return Pair(entry[0], entry[1])
