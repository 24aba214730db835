"""
Built-in templates for Rust enum generation.
"""

MODULE_HEADER_TEMPLATE = """\
// Code generated by openenum. DO NOT EDIT.
{% if module_docs %}
{{ module_docs | comment("//!") }}
{% endif %}
"""

ENUM_TEMPLATE = """\
{% if docs %}
{{ docs }}
{% endif %}
{{ metadata }}enum {{ enum_name }} {
{% for variant in variants %}
{% if variant.docs %}
{{ variant.docs | indent(4) }}
{% else %}
    #[allow(missing_docs)] // documentation missing in model
{% endif %}
{% if variant.deprecated %}
    #[deprecated]
{% endif %}
    {{ variant.name }},
{% endfor %}
{{ additional_members | indent(4) }}
}
"""

IMPL_TEMPLATE = """\
{% if allow_deprecated %}
#[allow(deprecated)]
{% endif %}
{{ from_impl }}

{{ from_str_impl }}

{% if allow_deprecated %}
#[allow(deprecated)]
{% endif %}
impl {{ enum_name }} {
    /// Returns the `&str` value of the enum member.
    pub fn as_str(&self) -> &str {
        match self {
{% for arm in as_str_arms %}
            {{ arm }}
{% endfor %}
{{ additional_as_str_arms | indent(12) }}
        }
    }

    /// Returns all the `&str` representations of the enum members.
    pub const fn values() -> &'static [&'static str] {
        &[{{ values | join(", ") }}]
    }
}

impl ::std::convert::AsRef<str> for {{ enum_name }} {
    fn as_ref(&self) -> &str {
        self.as_str()
    }
}

impl ::std::fmt::Display for {{ enum_name }} {
    fn fmt(&self, f: &mut ::std::fmt::Formatter<'_>) -> ::std::fmt::Result {
        f.write_str(self.as_str())
    }
}
"""

RUST_TEMPLATES = {
    "module_header.rs.j2": MODULE_HEADER_TEMPLATE,
    "enum.rs.j2": ENUM_TEMPLATE,
    "enum_impl.rs.j2": IMPL_TEMPLATE,
}
