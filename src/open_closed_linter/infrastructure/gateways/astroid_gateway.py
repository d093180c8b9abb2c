import logging
from typing import Optional

import astroid
from astroid import bases

from open_closed_linter.domain.constants import ENUM_BASE_QNAME
from open_closed_linter.domain.entities import SemanticType
from open_closed_linter.domain.protocols import TypeResolverProtocol

logger = logging.getLogger(__name__)

_UNION_NAMES = frozenset({"Optional", "Union"})


class AstroidGateway(TypeResolverProtocol):
    """Semantic type resolution backed by annotations and astroid inference."""

    def is_available(self, module: astroid.nodes.Module) -> bool:
        return True

    def resolve_type(self, node: astroid.nodes.NodeNG) -> Optional[SemanticType]:
        """Resolve an expression to a SemanticType.

        Explicit annotations win over inference, since astroid cannot infer
        parameters from their call sites.
        """
        class_node = self._declared_class(node) or self._inferred_class(node)
        if class_node is None:
            return None
        owner = self._enum_owner(class_node)
        return SemanticType(
            name=owner.name,
            qname=owner.qname(),
            is_enum=self.is_enum_class(owner),
        )

    def is_enum_class(self, class_node: astroid.nodes.ClassDef) -> bool:
        try:
            return class_node.is_subtype_of(ENUM_BASE_QNAME)
        except astroid.InferenceError:
            logger.debug("Could not compute ancestors of %s", class_node.qname())
            return False

    def _enum_owner(self, class_node: astroid.nodes.ClassDef) -> astroid.nodes.ClassDef:
        """Map an enum member back to its enum.

        astroid infers Color.RED as an instance of a synthetic class RED(Enum)
        whose parent is the assignment in Color's body.
        """
        parent = class_node.parent
        if parent is None or isinstance(parent, astroid.nodes.ClassDef):
            return class_node
        frame = parent.frame()
        if (
            isinstance(frame, astroid.nodes.ClassDef)
            and frame is not class_node
            and class_node.name in frame.locals
            and self.is_enum_class(class_node)
            and self.is_enum_class(frame)
        ):
            return frame
        return class_node

    # Declarations

    def _declared_class(self, node: astroid.nodes.NodeNG) -> Optional[astroid.nodes.ClassDef]:
        if isinstance(node, astroid.nodes.Name):
            return self._declared_class_of_name(node)
        if isinstance(node, astroid.nodes.Attribute):
            return self._declared_class_of_attribute(node)
        if isinstance(node, astroid.nodes.Call):
            return self._call_return_class(node)
        return None

    def _declared_class_of_name(self, node: astroid.nodes.Name) -> Optional[astroid.nodes.ClassDef]:
        for def_node in node.lookup(node.name)[1]:
            parent = def_node.parent
            if isinstance(parent, astroid.nodes.AnnAssign) and parent.annotation:
                return self._class_from_annotation(parent.annotation)
            if isinstance(parent, astroid.nodes.Arguments):
                annotation = self._argument_annotation(def_node, parent)
                if annotation is not None:
                    return self._class_from_annotation(annotation)
            if isinstance(parent, astroid.nodes.Assign) and isinstance(parent.value, astroid.nodes.Call):
                res = self._call_return_class(parent.value)
                if res is not None:
                    return res
        return None

    def _argument_annotation(
        self, def_node: astroid.nodes.NodeNG, args: astroid.nodes.Arguments
    ) -> Optional[astroid.nodes.NodeNG]:
        all_args = (args.posonlyargs or []) + (args.args or []) + (args.kwonlyargs or [])
        all_annos = (
            (args.posonlyargs_annotations or [])
            + (args.annotations or [])
            + (args.kwonlyargs_annotations or [])
        )
        for arg, annotation in zip(all_args, all_annos):
            if arg is def_node:
                return annotation
        return None

    def _declared_class_of_attribute(
        self, node: astroid.nodes.Attribute
    ) -> Optional[astroid.nodes.ClassDef]:
        """self.color where the class declares color: Color, or assigns an annotated value.

        Covers ``self.color: Color = ...`` and ``self.color = color`` with
        ``color: Color`` a parameter, in the class body or any method.
        """
        receiver = self._inferred_class(node.expr)
        if receiver is None:
            return None
        candidates = list(receiver.locals.get(node.attrname, [])) + list(
            receiver.instance_attrs.get(node.attrname, [])
        )
        for candidate in candidates:
            parent = candidate.parent
            if isinstance(parent, astroid.nodes.AnnAssign) and parent.annotation:
                return self._class_from_annotation(parent.annotation)
            if not isinstance(parent, astroid.nodes.Assign):
                continue
            res = self._declared_class_of_value(parent.value)
            if res is not None:
                return res
        return None

    def _declared_class_of_value(
        self, value: astroid.nodes.NodeNG
    ) -> Optional[astroid.nodes.ClassDef]:
        if isinstance(value, astroid.nodes.Name):
            return self._declared_class_of_name(value)
        if isinstance(value, astroid.nodes.Call):
            return self._call_return_class(value)
        return None

    def _call_return_class(self, node: astroid.nodes.Call) -> Optional[astroid.nodes.ClassDef]:
        try:
            for func in node.func.infer():
                returns = getattr(func, "returns", None)
                if returns is not None:
                    return self._class_from_annotation(returns)
        except astroid.InferenceError:
            logger.debug("Could not infer callee of %s", node.as_string())
        return None

    # Annotations

    def _class_from_annotation(self, anno: astroid.nodes.NodeNG) -> Optional[astroid.nodes.ClassDef]:
        if isinstance(anno, astroid.nodes.BinOp) and anno.op == "|":
            return self._single_member([anno.left, anno.right])
        if isinstance(anno, astroid.nodes.Subscript):
            return self._class_from_subscript(anno)
        if isinstance(anno, astroid.nodes.Const) and isinstance(anno.value, str):
            return self._class_from_string(anno)
        return self._first_class(anno)

    def _class_from_subscript(self, anno: astroid.nodes.Subscript) -> Optional[astroid.nodes.ClassDef]:
        origin = self._origin_name(anno.value)
        members = anno.slice.elts if isinstance(anno.slice, astroid.nodes.Tuple) else [anno.slice]
        if origin in _UNION_NAMES:
            return self._single_member(members)
        if origin == "Annotated" and members:
            return self._class_from_annotation(members[0])
        return None

    def _origin_name(self, node: astroid.nodes.NodeNG) -> str:
        """Optional, typing.Optional, t.Optional -> Optional."""
        if isinstance(node, astroid.nodes.Name):
            return node.name
        if isinstance(node, astroid.nodes.Attribute):
            return node.attrname
        return ""

    def _class_from_string(self, anno: astroid.nodes.Const) -> Optional[astroid.nodes.ClassDef]:
        """Forward references such as "Color" or "Color | None".

        The parsed expression is re-parented onto the annotation's parent so
        its names resolve in the scope the annotation was written in.
        """
        try:
            parsed = astroid.extract_node(anno.value)
        except (astroid.AstroidSyntaxError, ValueError):
            logger.debug("Unparsable string annotation %r", anno.value)
            return None
        parsed.parent = anno.parent
        return self._class_from_annotation(parsed)

    def _single_member(self, members: list[astroid.nodes.NodeNG]) -> Optional[astroid.nodes.ClassDef]:
        """The one non-None member of a union, if there is exactly one."""
        classes = []
        for member in members:
            if self._is_none(member):
                continue
            class_node = self._class_from_annotation(member)
            if class_node is None:
                return None
            classes.append(class_node)
        if len(classes) != 1:
            return None
        return classes[0]

    def _is_none(self, node: astroid.nodes.NodeNG) -> bool:
        if isinstance(node, astroid.nodes.Const) and node.value is None:
            return True
        return isinstance(node, astroid.nodes.Name) and node.name == "None"

    def _first_class(self, node: astroid.nodes.NodeNG) -> Optional[astroid.nodes.ClassDef]:
        try:
            for inferred in node.infer():
                if isinstance(inferred, astroid.nodes.ClassDef):
                    return inferred
        except astroid.InferenceError:
            logger.debug("Could not infer annotation %s", node.as_string())
        return None

    # Inference

    def _inferred_class(self, node: astroid.nodes.NodeNG) -> Optional[astroid.nodes.ClassDef]:
        """Class of the first inferred instance value of node."""
        try:
            for inferred in node.infer():
                if inferred is astroid.Uninferable:
                    continue
                if isinstance(inferred, bases.Instance):
                    proxied = inferred._proxied
                    if isinstance(proxied, astroid.nodes.ClassDef):
                        return proxied
        except astroid.InferenceError:
            logger.debug("Could not infer %s", node.as_string())
        return None


class NullTypeResolver(TypeResolverProtocol):
    """The empty binding context: no module has type information."""

    def is_available(self, module: astroid.nodes.Module) -> bool:
        return False

    def resolve_type(self, node: astroid.nodes.NodeNG) -> Optional[SemanticType]:
        return None
