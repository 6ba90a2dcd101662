import pytest

from render_pipeline.dom import Element, Text, build_id_map, parse_html, text_content
from render_pipeline.scripting import ElementHandle, JSContext


class Counter:
    def __init__(self):
        self.count = 0

    def __call__(self):
        self.count += 1


def make_context(html, timers=None):
    root = parse_html(html).tree
    mutations = Counter()
    context = JSContext(build_id_map(root), on_mutation=mutations,
                        timer_factory=timers)
    return root, context, mutations


def find(root, tag):
    stack = [root]
    while stack:
        node = stack.pop(0)
        if isinstance(node, Element):
            if node.tag == tag:
                return node
            stack.extend(node.children)
    return None


class TestDocument:
    def test_get_element_by_id(self):
        _, context, _ = make_context('<p id="greet">hi</p>')
        assert context.run("document.getElementById('greet').tagName") == "P"

    def test_missing_id_is_null(self):
        _, context, _ = make_context("<p>hi</p>")
        assert context.run("document.getElementById('nope')") is None

    def test_query_selector_by_id(self):
        _, context, _ = make_context('<div id="box"></div>')
        assert context.run("document.querySelector('#box').id") == "box"
        assert context.run("document.querySelector('div')") is None

    def test_same_element_same_handle(self):
        root, context, _ = make_context('<p id="a">x</p>')
        first = context.run("document.getElementById('a')")
        second = context.run("document.querySelector('#a')")
        assert first is second
        assert isinstance(first, ElementHandle)
        assert first.element is find(root, "p")


class TestElementProperties:
    def test_text_content_read(self):
        _, context, _ = make_context('<p id="p">Hello <b>world</b></p>')
        assert context.run("document.getElementById('p').textContent") == "Hello world"

    def test_text_content_write_replaces_children(self):
        root, context, mutations = make_context('<p id="p">old <b>x</b></p>')
        context.run("document.getElementById('p').textContent = 'new'")
        p = find(root, "p")
        assert len(p.children) == 1
        assert isinstance(p.children[0], Text)
        assert p.children[0].text == "new"
        assert p.children[0].parent is p
        assert mutations.count == 1

    def test_inner_html_write_parses_markup(self):
        root, context, mutations = make_context('<div id="d">old</div>')
        context.run("document.getElementById('d').innerHTML = '<b>bold</b> text'")
        div = find(root, "div")
        assert div.children[0].tag == "b"
        assert div.children[0].parent is div
        assert text_content(div) == "bold text"
        assert mutations.count == 1

    def test_inner_html_read(self):
        _, context, _ = make_context('<div id="d"><i>a</i>b</div>')
        assert context.run("document.getElementById('d').innerHTML") == "<i>a</i>b"

    def test_attributes(self):
        root, context, mutations = make_context('<a id="l" href="/x">x</a>')
        assert context.run("document.getElementById('l').getAttribute('href')") == "/x"
        assert context.run("document.getElementById('l').getAttribute('title')") is None
        context.run("document.getElementById('l').setAttribute('href', '/y')")
        assert find(root, "a").attributes["href"] == "/y"
        assert mutations.count == 1

    def test_value_property(self):
        root, context, _ = make_context('<input id="i" value="a">')
        assert context.run("document.getElementById('i').value") == "a"
        context.run("document.getElementById('i').value = 'b'")
        assert find(root, "input").attributes["value"] == "b"

    def test_unknown_property_is_undefined(self):
        _, context, _ = make_context('<p id="p"></p>')
        assert context.run("document.getElementById('p').style == undefined") is True


class TestEvents:
    def test_click_listener_runs_once(self):
        root, context, _ = make_context('<button id="btn">Go</button>')
        context.run("""
            var b = document.getElementById('btn');
            b.addEventListener('click', function (e) {
                console.log(e.type, b.id);
            });
        """)
        prevented = context.dispatch_event(find(root, "button"), "click")
        assert prevented is False
        assert context.console_messages == ["click btn"]

    def test_event_target_is_the_element_handle(self):
        root, context, _ = make_context('<button id="btn">Go</button>')
        context.run("""
            var b = document.getElementById('btn');
            b.addEventListener('click', function (e) { console.log(e.target == b) });
        """)
        context.dispatch_event(find(root, "button"), "click")
        assert context.console_messages == ["true"]

    def test_prevent_default(self):
        root, context, _ = make_context('<a id="l" href="/">x</a>')
        context.run("""
            document.getElementById('l').addEventListener('click',
                function (e) { e.preventDefault() });
        """)
        assert context.dispatch_event(find(root, "a"), "click") is True

    def test_listeners_are_per_type(self):
        root, context, _ = make_context('<p id="p">x</p>')
        context.run("""
            document.getElementById('p').addEventListener('keydown',
                function (e) { console.log('key') });
        """)
        assert context.dispatch_event(find(root, "p"), "click") is False
        assert context.console_messages == []

    def test_element_click_dispatches(self):
        _, context, _ = make_context('<p id="p">x</p>')
        context.run("""
            var p = document.getElementById('p');
            p.addEventListener('click', function () { alert('clicked') });
            p.click();
        """)
        assert context.alerts == ["clicked"]

    def test_failing_listener_does_not_stop_others(self):
        root, context, _ = make_context('<p id="p">x</p>')
        context.run("""
            var p = document.getElementById('p');
            p.addEventListener('click', function () { missing() });
            p.addEventListener('click', function () { console.log('second') });
        """)
        context.dispatch_event(find(root, "p"), "click")
        assert context.console_messages == ["second"]


class TestGlobals:
    def test_alert(self):
        _, context, _ = make_context("")
        context.run("alert('hi ' + 2); window.alert('bye')")
        assert context.alerts == ["hi 2", "bye"]

    def test_console_log_joins_arguments(self):
        _, context, _ = make_context("")
        context.run("console.log('a', 1, true, null)")
        assert context.console_messages == ["a 1 true null"]

    def test_failing_script_returns_none_and_state_survives(self):
        _, context, _ = make_context("")
        context.run("var kept = 1")
        assert context.run("var x = ;") is None
        assert context.run("undefinedThing()") is None
        assert context.run("kept + 1") == 2

    def test_set_timeout_runs_through_task_runner(self, timers):
        _, context, _ = make_context("", timers)
        context.run("setTimeout(function () { console.log('later') }, 100)")
        assert len(timers.created) == 1
        timer = timers.created[0]
        assert timer.started
        assert timer.interval == pytest.approx(0.1)
        assert context.console_messages == []

        timer.fire()
        assert context.console_messages == []
        assert context.run_pending() == 1
        assert context.console_messages == ["later"]
        assert context.run_pending() == 0

    def test_set_timeout_callback_sees_caller_parameters(self, timers):
        _, context, _ = make_context("", timers)
        context.run("""
            function schedule(n) {
                setTimeout(function () { console.log('n=' + n) });
            }
            schedule(5);
        """)
        timers.created[0].fire()
        context.run_pending()
        assert context.console_messages == ["n=5"]

    def test_discarded_context_skips_callbacks(self, timers):
        _, context, _ = make_context("", timers)
        context.run("setTimeout(function () { console.log('x') }, 0)")
        context.discarded = True
        timers.created[0].fire()
        assert context.run_pending() == 1
        assert context.console_messages == []


class TestNativeArguments:
    def test_extra_arguments_are_ignored(self):
        root, context, _ = make_context('<p id="p">x</p>')
        context.run("""
            document.getElementById('p').addEventListener('click',
                function () { console.log('ok') }, false);
        """)
        context.dispatch_event(find(root, "p"), "click")
        assert context.console_messages == ["ok"]

    def test_missing_arguments_are_undefined(self):
        root, context, _ = make_context('<p id="p">x</p>')
        assert context.run("document.getElementById() == null") is True
        context.run("document.getElementById('p').setAttribute('title')")
        assert find(root, "p").attributes["title"] == "undefined"

    def test_non_function_listener_is_ignored(self):
        root, context, _ = make_context('<p id="p">x</p>')
        context.run("document.getElementById('p').addEventListener('click')")
        assert context.dispatch_event(find(root, "p"), "click") is False

    def test_listener_failing_after_native_call_does_not_stop_others(self):
        root, context, _ = make_context('<p id="p">x</p>')
        context.run("""
            var p = document.getElementById('p');
            p.addEventListener('click', function () {
                document.getElementById(); undefinedCall();
            });
            p.addEventListener('click', function () { console.log('second') });
        """)
        context.dispatch_event(find(root, "p"), "click")
        assert context.console_messages == ["second"]


class TestRunawayScripts:
    def test_unbounded_recursion_fails_only_that_script(self):
        context = JSContext()
        assert context.run("function f(n) { return f(n + 1); } f(0);") is None
        assert context.run("1 + 1") == 2

    def test_recursion_in_listener_is_isolated(self):
        root, context, _ = make_context('<p id="p">x</p>')
        context.run("""
            function loop() { return loop() }
            var p = document.getElementById('p');
            p.addEventListener('click', function () { loop() });
            p.addEventListener('click', function () { console.log('after') });
        """)
        context.dispatch_event(find(root, "p"), "click")
        assert context.console_messages == ["after"]


class TestTimerLifetime:
    def test_timers_are_daemon_threads(self, timers):
        _, context, _ = make_context("", timers)
        context.run("setTimeout(function () {}, 4000)")
        assert timers.created[0].daemon is True

    def test_discard_cancels_pending_timers(self, timers):
        _, context, _ = make_context("", timers)
        context.run("setTimeout(function () {}, 10); setTimeout(function () {}, 20)")
        context.discard()
        assert context.discarded
        assert all(timer.cancelled for timer in timers.created)
        assert context.timers == []
