"""GraphQL documents sent to the monday.com API.

All caller-supplied values are bound through variables.
API Reference: https://developer.monday.com/api-reference/docs
"""

ITEMS_BY_ID_QUERY = """
query ($ids: [ID!]) {
  items(ids: $ids) {
    id
    name
    board {
      id
      name
    }
  }
}
"""

ITEMS_BY_COLUMN_VALUE_QUERY = """
query ($boardId: ID!, $columnId: String!, $value: String!) {
  items_page_by_column_values(
    limit: 1,
    board_id: $boardId,
    columns: [{column_id: $columnId, column_values: [$value]}]
  ) {
    items {
      id
      name
      column_values {
        id
        text
      }
    }
  }
}
"""

CHANGE_COLUMN_VALUE_MUTATION = """
mutation ($boardId: ID!, $itemId: ID, $columnId: String!, $value: JSON!) {
  change_column_value(
    board_id: $boardId,
    item_id: $itemId,
    column_id: $columnId,
    value: $value
  ) {
    id
  }
}
"""

CREATE_UPDATE_MUTATION = """
mutation ($itemId: ID!, $body: String!) {
  create_update(item_id: $itemId, body: $body) {
    id
  }
}
"""
