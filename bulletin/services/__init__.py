# Services package.
#
# Each module exposes async functions that encapsulate database access
# for one table:
#
#   post_service  : create / read / patch / hard delete / soft delete for Article
#   event_service : create / read / update / delete for Event
#
# All service functions accept an AsyncSession as their first argument
# so that the router layer controls the transaction boundary via the
# ``get_db`` dependency.
