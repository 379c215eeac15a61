"""
Tests that execute the generated JavaScript under node against a minimal DOM.
"""
import json
import shutil
import subprocess

import pytest

from compiler import build_registry, compile_registry
from zmx_core.config import CompilerConfig
from zmx_core.harness import boot_script
from zmx_core.models import ComponentSource

pytestmark = pytest.mark.skipif(shutil.which('node') is None, reason="node is not installed")

# Just enough DOM for the runtime: elements with attributes, children,
# a counted innerHTML and an attribute-presence querySelectorAll.
DOM_STUB = r"""
class HTMLElement {
  constructor(attributes) {
    this.attributes = attributes || {};
    this.children = [];
    this.mutations = 0;
    this._html = '';
  }
  get innerHTML() { return this._html; }
  set innerHTML(value) { this._html = value; this.mutations += 1; }
  getAttribute(name) {
    return Object.prototype.hasOwnProperty.call(this.attributes, name) ? this.attributes[name] : null;
  }
  appendChild(child) { this.children.push(child); return child; }
  querySelectorAll(selector) {
    var attribute = selector.slice(1, -1);
    var found = [];
    (function walk(node) {
      node.children.forEach(function (child) {
        if (Object.prototype.hasOwnProperty.call(child.attributes, attribute)) {
          found.push(child);
        }
        walk(child);
      });
    })(this);
    return found;
  }
}

function el(attributes, children) {
  var element = new HTMLElement(attributes);
  (children || []).forEach(function (child) { element.appendChild(child); });
  return element;
}

globalThis.HTMLElement = HTMLElement;
globalThis.window = globalThis;
globalThis.document = {
  readyState: 'complete',
  head: new HTMLElement(),
  elements: {},
  createElement: function () { return new HTMLElement(); },
  getElementById: function (id) { return this.elements[id] || null; },
};

function attempt(fn) {
  try { fn(); return null; } catch (e) { return e.message; }
}
"""

PRECONDITION = 'A valid container element must be provided.'


def run_module(tmp_path, components, scenario, extra=""):
    """
    Compile components, load the module in node and run a scenario.

    The scenario is JavaScript that assigns a JSON-serialisable `result`.
    """
    registry = build_registry(ComponentSource(name=n, template_text=t, style_text=s) for n, t, s in components)
    artifacts = compile_registry(registry, CompilerConfig())

    script = tmp_path / 'scenario.js'
    script.write_text(
        DOM_STUB + "\n" + artifacts.module_text + "\n" + extra + "\nvar result;\n" + scenario
        + "\nconsole.log(JSON.stringify(result));\n",
        encoding='utf-8',
    )
    completed = subprocess.run(['node', str(script)], capture_output=True, text=True, check=True)
    return json.loads(completed.stdout)


class TestGeneratedRender:
    """The generated render functions follow the placeholder rules."""

    def test_prop_and_default(self, tmp_path):
        result = run_module(tmp_path, [('greeting', 'Hello {name:World}!', '')], """
            var a = el(), b = el();
            ComponentRegistry.greeting(a, {name: 'Ada'});
            ComponentRegistry.greeting(b, {});
            result = [a.innerHTML, b.innerHTML];
        """)

        assert result == ['Hello Ada!', 'Hello World!']

    def test_empty_prop_and_missing_props(self, tmp_path):
        result = run_module(tmp_path, [('g', '[{name:x}] [{other}]', '')], """
            var a = el(), b = el();
            ComponentRegistry.g(a, {name: '', other: null});
            ComponentRegistry.g(b);
            result = [a.innerHTML, b.innerHTML];
        """)

        assert result == ['[x] []', '[x] []']

    def test_inherited_members_are_not_props(self, tmp_path):
        result = run_module(tmp_path, [('p', '[{constructor}] [{toString:x}] [{__proto__}]', '')], """
            var a = el();
            ComponentRegistry.p(a, {});
            result = a.innerHTML;
        """)

        assert result == '[] [x] []'

    def test_duplicates_resolve_by_name(self, tmp_path):
        result = run_module(tmp_path, [('d', '{name} / {name:Anon} / {name}', '')], """
            var a = el(), b = el();
            ComponentRegistry.d(a, {name: 'Ada'});
            ComponentRegistry.d(b, {});
            result = [a.innerHTML, b.innerHTML];
        """)

        assert result == ['Ada / Ada / Ada', ' / Anon / ']

    def test_substitution_is_not_recursive(self, tmp_path):
        result = run_module(tmp_path, [('r', '{a}', '')], """
            var a = el();
            ComponentRegistry.r(a, {a: '{b}', b: 'nope'});
            result = a.innerHTML;
        """)

        assert result == '{b}'

    def test_plain_text_is_verbatim(self, tmp_path):
        text = '<p>No props: a } b { c $& $1</p>'
        result = run_module(tmp_path, [('t', text, '')], """
            var a = el();
            ComponentRegistry.t(a, {c: 'x'});
            result = a.innerHTML;
        """)

        assert result == text

    def test_non_element_container_throws_without_mutation(self, tmp_path):
        result = run_module(tmp_path, [('main', 'x', '.m {}')], """
            result = [
                attempt(function () { ComponentRegistry.main({}, {}); }),
                attempt(function () { ComponentRegistry.main(null, {}); }),
                attempt(function () { initializeComponents('root', {}); }),
                document.head.children.length,
            ];
        """)

        assert result == [PRECONDITION, PRECONDITION, PRECONDITION, 0]


class TestGeneratedInitialize:
    """initializeComponents renders every match and injects styles once."""

    def test_renders_matching_descendants_with_shared_props(self, tmp_path):
        components = [('main', 'M:{title}', '.m {}'), ('card', 'C:{title:none}', '.c {}')]
        result = run_module(tmp_path, components, """
            var inner = el({'data-component': 'card'});
            var root = el({}, [
                el({'data-component': 'main'}),
                el({}, [inner]),
                el({'data-component': 'card'}),
                el({'data-component': 'other'}),
            ]);
            initializeComponents(root, {title: 'T'});
            initializeComponents(root, {title: 'T'});
            result = {
                html: [root.children[0].innerHTML, inner.innerHTML, root.children[2].innerHTML,
                       root.children[3].innerHTML],
                rootMutations: root.mutations,
                styles: document.head.children.map(function (s) { return s.textContent; }),
            };
        """)

        assert result['html'] == ['M:T', 'C:T', 'C:T', '']
        assert result['rootMutations'] == 0
        assert result['styles'] == ['.m {}\n.c {}']

    def test_no_style_element_without_styles(self, tmp_path):
        result = run_module(tmp_path, [('main', 'x', '')], """
            initializeComponents(el(), {});
            result = document.head.children.length;
        """)

        assert result == 0

    def test_boot_initializes_root_once(self, tmp_path):
        boot = boot_script(CompilerConfig())
        result = run_module(tmp_path, [('main', 'Hi {name:there}', '')], """
            result = [document.elements.root.children[0].innerHTML, document.elements.root.children[0].mutations];
        """, extra="""
            document.elements['generated-component-container'] = el({}, [el({'data-component': 'main'})]);
            document.elements.root = document.elements['generated-component-container'];
        """ + boot)

        assert result == ['Hi there', 1]
