"""스크립트에 노출되는 DOM API

document: getElementById, querySelector('#id')
element:  getAttribute, setAttribute, addEventListener, click(),
          tagName, id, value, textContent, innerHTML
"""
from typing import TYPE_CHECKING

from ..dom import Text, parse_html, text_content, inner_html, replace_children
from .errors import ScriptRuntimeError
from .values import (
    UNDEFINED, JSFunction, JSObject, NativeFunction, to_js_string,
)

if TYPE_CHECKING:
    from .js_context import JSContext


class ElementHandle:
    """Element에 대한 살아있는 참조 (복사본이 아님)"""

    def __init__(self, element, context: "JSContext"):
        self.element = element
        self.context = context

    def get_attribute(self, name):
        return self.element.attributes.get(to_js_string(name))

    def set_attribute(self, name, value):
        self.element.attributes[to_js_string(name)] = to_js_string(value)
        self.context.notify_mutation()

    def add_event_listener(self, type, listener):
        if not isinstance(listener, (JSFunction, NativeFunction)):
            return
        self.context.add_listener(self.element, to_js_string(type), listener)

    def click(self):
        self.context.dispatch_event(self.element, "click")

    def get_property(self, name):
        attributes = self.element.attributes
        if name == "tagName":
            return self.element.tag.upper()
        elif name == "id":
            return attributes.get("id", "")
        elif name == "value":
            return attributes.get("value", "")
        elif name == "textContent":
            return text_content(self.element)
        elif name == "innerHTML":
            return inner_html(self.element)
        elif name == "getAttribute":
            return NativeFunction("getAttribute", self.get_attribute)
        elif name == "setAttribute":
            return NativeFunction("setAttribute", self.set_attribute)
        elif name == "addEventListener":
            return NativeFunction("addEventListener", self.add_event_listener)
        elif name == "click":
            return NativeFunction("click", self.click)
        return UNDEFINED

    def set_property(self, name, value):
        if name == "textContent":
            replace_children(self.element, [Text(to_js_string(value), self.element)])
        elif name == "innerHTML":
            replace_children(self.element, parse_fragment(to_js_string(value)))
        elif name in ("id", "value"):
            self.element.attributes[name] = to_js_string(value)
        else:
            raise ScriptRuntimeError(f"cannot set property '{name}' of element")
        self.context.notify_mutation()

    def __repr__(self):
        return f"[object HTMLElement <{self.element.tag}>]"


def parse_fragment(markup: str):
    """innerHTML 대입용. body 안에 넣어 파싱한 뒤 body의 자식만 꺼냄"""
    root = parse_html("<body>" + markup + "</body>").tree
    for child in root.children:
        if getattr(child, "tag", None) == "body":
            return child.children
    return []


def get_host_property(obj, name):
    if isinstance(obj, ElementHandle):
        return obj.get_property(name)
    return UNDEFINED


def set_host_property(obj, name, value):
    if isinstance(obj, ElementHandle):
        obj.set_property(name, value)
        return
    raise ScriptRuntimeError(
        f"cannot set property '{name}' of {to_js_string(obj)}")


def make_document(context: "JSContext") -> JSObject:
    def get_element_by_id(id):
        return context.lookup(to_js_string(id))

    def query_selector(selector):
        selector = to_js_string(selector).strip()
        if selector.startswith("#"):
            return context.lookup(selector[1:])
        return None

    return JSObject({
        "getElementById": NativeFunction("getElementById", get_element_by_id),
        "querySelector": NativeFunction("querySelector", query_selector),
    })


def make_window(context: "JSContext") -> JSObject:
    return JSObject({
        "alert": NativeFunction("alert", context.alert),
        "setTimeout": NativeFunction("setTimeout", context.set_timeout),
    })


def make_console(context: "JSContext") -> JSObject:
    return JSObject({
        "log": NativeFunction("log", context.console_log),
    })
