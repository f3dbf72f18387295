"""
Step definitions for hierarchical tag matching
"""

from behave import given, then, when  # type: ignore[import-untyped]

from tagtree import TagBag, TagCapacityExceeded, TagRegistry


def _id(context, path):
    tag_id = context.registry.id_of(path)
    assert tag_id is not None, f"{path} is not registered"
    return tag_id


@given("an empty registry with capacity {capacity:d}")  # type: ignore[misc]
def step_given_empty_registry(context, capacity):
    """Create the registry under test"""
    context.registry = TagRegistry(capacity=capacity)
    context.error = None


@when("I register the following tags:")  # type: ignore[misc]
def step_when_register_tags(context):
    """Register every path in the table"""
    for row in context.table:
        context.registry.register(row["path"])


@when('I try to register "{path}"')  # type: ignore[misc]
def step_when_try_register(context, path):
    """Register a path, keeping any capacity error"""
    try:
        context.registry.register(path)
    except TagCapacityExceeded as e:
        context.error = e


@given('a bag with "{first}" and "{second}"')  # type: ignore[misc]
def step_given_bag(context, first, second):
    """Build a bag from two registered paths"""
    context.bag = TagBag([_id(context, first), _id(context, second)])


@then("the registry holds {count:d} tags")  # type: ignore[misc]
def step_then_registry_size(context, count):
    assert len(context.registry) == count, f"Expected {count}, got {len(context.registry)}"


@then('the tags "{a}", "{b}" and "{c}" are distinct')  # type: ignore[misc]
def step_then_distinct(context, a, b, c):
    ids = {_id(context, a), _id(context, b), _id(context, c)}
    assert len(ids) == 3, f"Expected 3 distinct ids, got {ids}"


@then('"{descendant}" matches "{ancestor}" is {result}')  # type: ignore[misc]
def step_then_is_match(context, descendant, ancestor, result):
    expected = result == "true"
    actual = context.registry.is_match(_id(context, descendant), _id(context, ancestor))
    assert actual is expected, f"is_match({descendant}, {ancestor}) = {actual}"


@then('the bag matches "{path}"')  # type: ignore[misc]
def step_then_bag_any_match(context, path):
    assert context.bag.any_match(_id(context, path), context.registry)


@then('the bag matches all of "{path}"')  # type: ignore[misc]
def step_then_bag_all_match_from(context, path):
    assert context.bag.all_match_from(TagBag([_id(context, path)]), context.registry)


@then('the bag matches none of "{path}"')  # type: ignore[misc]
def step_then_bag_none_match(context, path):
    assert context.bag.none_match(_id(context, path), context.registry)


@then("registration fails with a capacity error")  # type: ignore[misc]
def step_then_capacity_error(context):
    assert isinstance(context.error, TagCapacityExceeded), f"Got {context.error!r}"


@then('"{path}" is still registered')  # type: ignore[misc]
def step_then_registered(context, path):
    assert context.registry.id_of(path) is not None


@then('"{path}" is not registered')  # type: ignore[misc]
def step_then_not_registered(context, path):
    assert context.registry.id_of(path) is None
