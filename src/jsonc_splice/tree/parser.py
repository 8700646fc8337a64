"""TreeParser: converts JSONC text into an offset-annotated TreeNode tree.

Recursive-descent parser over the token stream from ``tokenize``.  The
grammar is JSON with two relaxations: comments anywhere whitespace is
allowed, and a single trailing comma before ``}`` or ``]``.

Spans never include surrounding whitespace or comments:
- Scalars span their literal.
- Containers span from the opening bracket to the closing bracket.
- Properties span from the key's opening quote to the end of the value.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from jsonc_splice.errors import DocumentSyntaxError
from jsonc_splice.tree.nodes import NodeType, TreeNode
from jsonc_splice.tree.scanner import Token, TokenKind, tokenize

_SCALAR_TOKENS: dict[TokenKind, NodeType] = {
    TokenKind.STRING: NodeType.STRING,
    TokenKind.NUMBER: NodeType.NUMBER,
    TokenKind.TRUE: NodeType.BOOLEAN,
    TokenKind.FALSE: NodeType.BOOLEAN,
    TokenKind.NULL: NodeType.NULL,
}


@dataclass
class TreeParser:
    """Parses one document.  Instances are single-use.

    Example::
        root = TreeParser('{"a": [1, 2] // note\\n}').parse()
        # root: OBJECT -> PROPERTY(STRING "a", ARRAY -> NUMBER, NUMBER)
    """

    text: str
    _tokens: list[Token] = field(init=False, default_factory=list)
    _pos: int = field(init=False, default=0)

    def parse(self) -> TreeNode | None:
        """Parse the whole document.

        Returns:
            The root node, or None when the text holds only whitespace and
            comments.

        Raises:
            DocumentSyntaxError: If the text is not valid JSONC.
        """
        self._tokens = tokenize(self.text)
        self._pos = 0
        if self._peek().kind is TokenKind.EOF:
            return None
        root = self._parse_value()
        trailing = self._peek()
        if trailing.kind is not TokenKind.EOF:
            raise DocumentSyntaxError("unexpected content after document", trailing.offset)
        return root

    # ------------------------------------------------------------------
    # Token cursor
    # ------------------------------------------------------------------

    def _peek(self) -> Token:
        return self._tokens[self._pos]

    def _advance(self) -> Token:
        token = self._tokens[self._pos]
        if token.kind is not TokenKind.EOF:
            self._pos += 1
        return token

    def _expect(self, kind: TokenKind, what: str) -> Token:
        token = self._peek()
        if token.kind is not kind:
            raise DocumentSyntaxError(f"expected {what}", token.offset)
        return self._advance()

    # ------------------------------------------------------------------
    # Grammar
    # ------------------------------------------------------------------

    def _parse_value(self) -> TreeNode:
        token = self._peek()
        if token.kind is TokenKind.OPEN_BRACE:
            return self._parse_object()
        if token.kind is TokenKind.OPEN_BRACKET:
            return self._parse_array()
        node_type = _SCALAR_TOKENS.get(token.kind)
        if node_type is None:
            raise DocumentSyntaxError("expected a value", token.offset)
        self._advance()
        return TreeNode(
            node_type=node_type, offset=token.offset, length=token.length, value=token.value
        )

    def _parse_object(self) -> TreeNode:
        start = self._advance()
        node = TreeNode(node_type=NodeType.OBJECT, offset=start.offset, length=0)

        while self._peek().kind is not TokenKind.CLOSE_BRACE:
            key = self._expect(TokenKind.STRING, "property name")
            colon = self._expect(TokenKind.COLON, "':'")
            value = self._parse_value()
            key_node = TreeNode(
                node_type=NodeType.STRING, offset=key.offset, length=key.length, value=key.value
            )
            node.children.append(
                TreeNode(
                    node_type=NodeType.PROPERTY,
                    offset=key.offset,
                    length=value.end - key.offset,
                    colon_offset=colon.offset,
                    children=[key_node, value],
                )
            )
            if self._peek().kind is TokenKind.COMMA:
                self._advance()
            elif self._peek().kind is not TokenKind.CLOSE_BRACE:
                raise DocumentSyntaxError("expected ',' or '}'", self._peek().offset)

        end = self._advance()
        node.length = end.end - node.offset
        return node

    def _parse_array(self) -> TreeNode:
        start = self._advance()
        node = TreeNode(node_type=NodeType.ARRAY, offset=start.offset, length=0)

        while self._peek().kind is not TokenKind.CLOSE_BRACKET:
            node.children.append(self._parse_value())
            if self._peek().kind is TokenKind.COMMA:
                self._advance()
            elif self._peek().kind is not TokenKind.CLOSE_BRACKET:
                raise DocumentSyntaxError("expected ',' or ']'", self._peek().offset)

        end = self._advance()
        node.length = end.end - node.offset
        return node


def parse_tree(text: str) -> TreeNode | None:
    """Parse ``text`` into a TreeNode tree (None for an empty document)."""
    return TreeParser(text).parse()
