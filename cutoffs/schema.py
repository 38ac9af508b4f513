from decimal import Decimal
from typing import Dict, List, Union

import graphene
from graphene_django import DjangoObjectType
from graphql import GraphQLError
from graphql.language import ast

from . import services
from .models import CutoffRecord

# Values allowed in the dynamicCastes mapping.
DynamicValue = Union[None, bool, int, float, str, List["DynamicValue"], Dict[str, "DynamicValue"]]


def to_dynamic_value(value) -> DynamicValue:
    if value is None or isinstance(value, (bool, int, float, str)):
        return value
    if isinstance(value, Decimal):
        return int(value) if value == value.to_integral_value() else float(value)
    if isinstance(value, (list, tuple)):
        return [to_dynamic_value(item) for item in value]
    if isinstance(value, dict):
        return {str(key): to_dynamic_value(item) for key, item in value.items()}
    raise GraphQLError(f"JSON cannot represent value: {value!r}")


class JSON(graphene.Scalar):
    """Arbitrary JSON value"""

    serialize = staticmethod(to_dynamic_value)
    parse_value = staticmethod(to_dynamic_value)

    @classmethod
    def parse_literal(cls, node, _variables=None):
        if isinstance(node, (ast.StringValueNode, ast.BooleanValueNode)):
            return node.value
        if isinstance(node, ast.IntValueNode):
            return int(node.value)
        if isinstance(node, ast.FloatValueNode):
            return float(node.value)
        if isinstance(node, ast.ObjectValueNode):
            return {field.name.value: cls.parse_literal(field.value) for field in node.fields}
        if isinstance(node, ast.ListValueNode):
            return [cls.parse_literal(item) for item in node.values]
        return None


class CutoffRecordType(DjangoObjectType):
    sno = graphene.ID(required=True)

    class Meta:
        model = CutoffRecord
        name = "TsCutoff2024"
        fields = "__all__"
        convert_choices_to_enum = False


class RankedCutoffType(graphene.ObjectType):
    class Meta:
        name = "TsCutoff2024Dynamic"

    sno = graphene.ID(required=True)
    inst_code = graphene.String()
    institute_name = graphene.String()
    place = graphene.String()
    dist_code = graphene.String()
    branch_name = graphene.String()
    branch_code = graphene.String()
    co_education = graphene.String()
    dynamic_castes = JSON(name="dynamicCastes")


class RankFilterInput(graphene.InputObjectType):
    min_rank = graphene.Int(required=True, name="minRank")
    max_rank = graphene.Int(required=True, name="maxRank")
    branch_codes = graphene.List(graphene.NonNull(graphene.String), name="branchCodes")
    caste_columns = graphene.List(graphene.NonNull(graphene.String), name="casteColumns")
    dist_codes = graphene.List(graphene.NonNull(graphene.String), name="distCodes")
    co_edu = graphene.Boolean(name="coEdu")


class Query(graphene.ObjectType):
    ts_cutoff_2024s = graphene.List(
        graphene.NonNull(CutoffRecordType),
        required=True,
        limit=graphene.Int(default_value=50),
        offset=graphene.Int(default_value=0),
        name="tsCutoff2024s",
    )
    ts_cutoff_2024 = graphene.Field(
        CutoffRecordType,
        sno=graphene.Int(required=True),
        name="tsCutoff2024",
    )
    ts_cutoff_2024s_by_inst_codes = graphene.List(
        graphene.NonNull(CutoffRecordType),
        required=True,
        inst_codes=graphene.List(graphene.NonNull(graphene.String), required=True),
        name="tsCutoff2024sByInstCodes",
    )
    ts_cutoff_2024s_by_rank = graphene.List(
        graphene.NonNull(RankedCutoffType),
        required=True,
        filter=RankFilterInput(required=True),
        name="tsCutoff2024sByRank",
    )

    def resolve_ts_cutoff_2024s(root, info, limit=50, offset=0):
        # An explicit null falls back to the default window.
        return services.list_cutoffs(
            limit=50 if limit is None else limit,
            offset=0 if offset is None else offset,
        )

    def resolve_ts_cutoff_2024(root, info, sno):
        return services.get_cutoff(sno)

    def resolve_ts_cutoff_2024s_by_inst_codes(root, info, inst_codes):
        return services.cutoffs_for_institutes(inst_codes)

    def resolve_ts_cutoff_2024s_by_rank(root, info, filter):
        return services.search_by_rank(
            min_rank=filter.min_rank,
            max_rank=filter.max_rank,
            caste_columns=filter.caste_columns,
            branch_codes=filter.branch_codes,
            dist_codes=filter.dist_codes,
            girls_only=bool(filter.co_edu),
        )


# Read-only: no Mutation type.
schema = graphene.Schema(query=Query, auto_camelcase=False)
