"""
References:
    - [features](https://lesscss.org/features/)
    - [variables](https://lesscss.org/features/#variables-feature)
    - [mixins](https://lesscss.org/features/#mixins-feature)
    - [detached rulesets](https://lesscss.org/features/#detached-rulesets-feature)
    - [css syntax](https://www.w3.org/TR/css-syntax-3/)

<comment/>
<variable-declaration>@name: <value/>;</variable-declaration>
<variable-call>@name();</variable-call>
<mixin-declaration>
    .name() <block/>
</mixin-declaration>
<mixin-call>#namespace > .name();</mixin-call>
<qualified-rule>
    <selector/>, <selector/> <block>
        <property/>: <value/> !important;
        <item/>
    </block>
</qualified-rule>

selector => #id, .class, element, *,
value => string, number+unit, #hex, ident, function, url, @variable, $property,
string => 'text', "text @{variable} ${property}",
block => `{}` holding any item, nested without limit up to `max_depth`,
"""
