import logging

from buckets import LinearMap, FixedArray, format_map, maps_equal

logger = logging.getLogger(__name__)

# Prime.
DEFAULT_TABLE_SIZE = 101


# Computes a mod b as clock arithmetic: 0 <= result < b, also for negative a. O(1)
def mod(a, b):
    if b <= 0:
        raise ValueError("modulus must be positive, got " + repr(b))
    return ((a % b) + b) % b


class ChainedHashMap(object):
    # A map stored as a fixed number of buckets, each bucket a small map of its own holding
    # every key that hashes to it. The table never grows: choose table_size for the expected
    # number of keys. bucket_factory builds one empty bucket map and defaults to LinearMap.
    # O(table_size) to initialize.
    def __init__(self, table_size=DEFAULT_TABLE_SIZE, bucket_factory=LinearMap):
        self.bucket_factory = bucket_factory
        self.modifications = 0
        self.create_new_rep(table_size)
        logger.debug("Created ChainedHashMap with %d buckets", table_size)

    # Replaces the representation with table_size empty buckets. Any bucket handed out
    # earlier is no longer part of this map. O(table_size)
    def create_new_rep(self, table_size):
        if not isinstance(table_size, int) or isinstance(table_size, bool) or table_size <= 0:
            raise ValueError("table_size must be a positive integer, got " + repr(table_size))
        self.buckets = FixedArray(table_size, self.bucket_factory)
        self.count = 0
        self.modifications += 1

    # Allows len() function to take this object as an argument. O(1)
    def __len__(self):
        return self.count

    # Allows stored pairs to be iterated in a for each loop. O(1), iteration itself is O(n + table_size).
    def __iter__(self):
        return self.iterator()

    # Allows use of the in keyword. O(1) if there are few hash collisions
    def __contains__(self, key):
        return self.has_key(key)

    def __getitem__(self, key):
        return self.value(key)

    # Subscript assignment adds a new key or replaces the value of an existing one.
    def __setitem__(self, key, value):
        if self.has_key(key):
            self.replace_value(key, value)
        else:
            self.add(key, value)

    def __delitem__(self, key):
        self.remove(key)

    def __eq__(self, other):
        if not hasattr(other, "size") or not hasattr(other, "has_key"):
            return NotImplemented
        return maps_equal(self, other)

    __hash__ = None

    def __repr__(self):
        return format_map(self)

    # Builds an empty default-sized map with the same kind of buckets. O(DEFAULT_TABLE_SIZE)
    def new_instance(self):
        return ChainedHashMap(DEFAULT_TABLE_SIZE, self.bucket_factory)

    # Empties the map. The table size goes back to the default. O(DEFAULT_TABLE_SIZE)
    def clear(self):
        self.create_new_rep(DEFAULT_TABLE_SIZE)
        logger.debug("Cleared ChainedHashMap")

    # Takes over the buckets and count of source and leaves source as a fresh empty
    # default-sized map. Nothing is copied, so exactly one of the two maps holds the data
    # afterwards. O(DEFAULT_TABLE_SIZE) for the reset of source.
    def transfer_from(self, source):
        if not isinstance(source, ChainedHashMap):
            raise TypeError("cannot transfer from " + type(source).__name__)
        if source is self:
            raise ValueError("cannot transfer a map into itself")
        self.buckets = source.buckets
        self.count = source.count
        self.bucket_factory = source.bucket_factory
        self.modifications += 1
        source.create_new_rep(DEFAULT_TABLE_SIZE)
        logger.debug("Transferred %d pairs over %d buckets", self.count, len(self.buckets))

    # Index of the bucket that holds key. O(1)
    def placement_index(self, key):
        return mod(hash(key), len(self.buckets))

    def table_size(self):
        return len(self.buckets)

    def bucket(self, index):
        return self.buckets.entry(index)

    # Sizes of all buckets in index order, for checking how evenly keys are spread. O(table_size)
    def bucket_sizes(self):
        return [bucket.size() for bucket in self.buckets]

    # Adds a pair whose key is not already present. The table is never resized, so this is
    # O(1) only while buckets stay short.
    def add(self, key, value):
        if key is None or value is None:
            raise ValueError("key and value must not be None")
        bucket = self.buckets.entry(self.placement_index(key))
        if bucket.has_key(key):
            raise KeyError(key)
        bucket.add(key, value)
        self.count += 1
        self.modifications += 1

    # Removes the pair with the given key and returns it. O(1)
    def remove(self, key):
        if key is None:
            raise KeyError(key)
        bucket = self.buckets.entry(self.placement_index(key))
        pair = bucket.remove(key)
        self.count -= 1
        self.modifications += 1
        return pair

    # Removes some pair from the first non-empty bucket, always scanning from bucket 0.
    # A map whose only pairs sit in high buckets pays O(table_size) per call.
    def remove_any(self):
        if self.count == 0:
            raise KeyError("remove_any(): map is empty")
        index = 0
        while self.buckets.entry(index).size() == 0:
            index += 1
        pair = self.buckets.entry(index).remove_any()
        self.count -= 1
        self.modifications += 1
        return pair

    # Retrieves the value stored under the given key. O(1)
    def value(self, key):
        if key is None:
            raise KeyError(key)
        return self.buckets.entry(self.placement_index(key)).value(key)

    # Whether key is in the map. Defined for every key, None included. O(1)
    def has_key(self, key):
        if key is None:
            return False
        return self.buckets.entry(self.placement_index(key)).has_key(key)

    # Number of pairs, tracked on every add and remove. O(1)
    def size(self):
        return self.count

    # Stores a new value under an existing key and returns the old one. The pair moves
    # within its bucket, so live iterators are invalidated. O(1)
    def replace_value(self, key, value):
        if value is None:
            raise ValueError("value must not be None")
        bucket = self.buckets.entry(self.placement_index(key))
        old = bucket.remove(key)
        bucket.add(key, value)
        self.modifications += 1
        return old.value

    # Some key mapped to value. O(n)
    def key(self, value):
        for pair in self:
            if pair.value == value:
                return pair.key
        raise KeyError(value)

    # O(n)
    def has_value(self, value):
        for pair in self:
            if pair.value == value:
                return True
        return False

    # Whether any key of other is also a key of this map. O(m) for another map of m pairs.
    def shares_key_with(self, other):
        for pair in other:
            if self.has_key(pair.key):
                return True
        return False

    # Moves every pair of other into this map, leaving other empty. The two maps must not
    # share a key; this is checked before anything moves. O(m)
    def combine_with(self, other):
        if other is self:
            raise ValueError("cannot combine a map with itself")
        if not hasattr(other, "remove_any") or not hasattr(other, "size"):
            raise TypeError("cannot combine with " + type(other).__name__)
        for pair in other:
            if self.has_key(pair.key):
                raise KeyError(pair.key)
        moved = other.size()
        while other.size() > 0:
            pair = other.remove_any()
            self.add(pair.key, pair.value)
        logger.debug("Combined %d pairs into map of size %d", moved, self.count)

    # Allows for the pairs to be iterated. A new iterator is needed for every pass. O(1)
    def iterator(self):
        return ChainedHashMapIterator(self)

    # Allows for the keys stored in the map to be iterated. O(1)
    def key_iterator(self):
        return KeyIterator(self)

    # Allows for the values stored in the map to be iterated. O(1)
    def value_iterator(self):
        return ValueIterator(self)


class ChainedHashMapIterator(object):
    # Walks the buckets in index order and each bucket in its own order. seen counts the
    # pairs produced so far and bucket is the index the bucket iterator comes from. O(1)
    # to initialize.
    def __init__(self, hash_map):
        self.hash_map = hash_map
        self.expected_modifications = hash_map.modifications
        self.seen = 0
        self.bucket = 0
        self.bucket_iterator = iter(hash_map.bucket(0))

    # Conforms to iterator protocol. O(1)
    def __iter__(self):
        return self

    # Checked against the map's count instead of the buckets, so no scan is needed. O(1)
    def has_next(self):
        return self.seen < self.hash_map.count

    # Drains the current bucket, then moves to the next bucket that yields a pair, skipping
    # any run of empty buckets. Since has_next is bounded by count, the last pair is found
    # without probing past the final bucket; probing past it means the map changed.
    def __next__(self):
        if self.expected_modifications != self.hash_map.modifications:
            raise RuntimeError("map changed during iteration")
        if not self.has_next():
            raise StopIteration
        pair = next(self.bucket_iterator, None)
        while pair is None:
            self.bucket += 1
            if self.bucket >= self.hash_map.table_size():
                raise RuntimeError("map changed during iteration")
            self.bucket_iterator = iter(self.hash_map.bucket(self.bucket))
            pair = next(self.bucket_iterator, None)
        self.seen += 1
        return pair

    def remove(self):
        raise NotImplementedError("remove operation not supported")


class KeyIterator(object):
    # Provides an abstraction to iterate on the keys of the map. O(1) to initialize.
    def __init__(self, hash_map):
        self.iterator = ChainedHashMapIterator(hash_map)

    def __iter__(self):
        return self

    def __next__(self):
        return next(self.iterator).key


class ValueIterator(object):
    def __init__(self, hash_map):
        self.iterator = ChainedHashMapIterator(hash_map)

    def __iter__(self):
        return self

    def __next__(self):
        return next(self.iterator).value
