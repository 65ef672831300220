"""
Output schema for the downstream catalog import.

OUTPUT_HEADERS is the exact, ordered list of column names the catalog system
expects on the "Produtos" sheet. Names are Portuguese and must match literally.

NUMERIC_OUTPUT_COLUMNS lists the columns whose empty value is None rather than "".
"""

from __future__ import annotations

from typing import Any, Dict, List

OUTPUT_HEADERS: List[str] = [
    "ID",
    "Código",
    "Descrição",
    "Unidade",
    "NCM",
    "Origem",
    "Preço",
    "Valor IPI fixo",
    "Observações",
    "Situação",
    "Estoque",
    "Preço de custo",
    "Cód no fornecedor",
    "Fornecedor",
    "Localização",
    "Estoque maximo",
    "Estoque minimo",
    "Peso líquido (Kg)",
    "Peso bruto (Kg)",
    "GTIN/EAN",
    "GTIN/EAN da embalagem",
    "Largura do Produto",
    "Altura do Produto",
    "Profundidade do produto",
    "Data Validade",
    "Descrição do Produto no Fornecedor",
    "Descrição Complementar",
    "Itens p/ caixa",
    "Produto Variação",
    "Tipo Produção",
    "Classe de enquadramento do IPI",
    "Código da lista de serviços",
    "Tipo do item",
    "Grupo de Tags/Tags",
    "Tributos",
    "Código Pai",
    "Código Integração",
    "Grupo de produtos",
    "Marca",
    "CEST",
    "Volumes",
    "Descrição Curta",
    "Cross-Docking",
    "URL Imagens Externas",
    "Link Externo",
    "Meses Garantia no Fornecedor",
    "Clonar dados do pai",
    "Condição do produto",
    "Frete Grátis",
    "Número FCI",
    "Vídeo",
    "Departamento",
    "Unidade de medida",
    "Preço de compra",
    "Valor base ICMS ST para retenção",
    "Valor ICMS ST para retenção",
    "Valor ICMS próprio do substituto",
    "Categoria do produto",
    "Informações Adicionais",
]

NUMERIC_OUTPUT_COLUMNS = frozenset(
    {
        "Valor IPI fixo",
        "Estoque maximo",
        "Estoque minimo",
        "Peso líquido (Kg)",
        "Peso bruto (Kg)",
        "Largura do Produto",
        "Altura do Produto",
        "Profundidade do produto",
        "Itens p/ caixa",
        "Volumes",
        "Valor base ICMS ST para retenção",
        "Valor ICMS ST para retenção",
        "Valor ICMS próprio do substituto",
    }
)


def empty_output_record() -> Dict[str, Any]:
    """Return a record with every output column set to its schema default."""
    return {h: (None if h in NUMERIC_OUTPUT_COLUMNS else "") for h in OUTPUT_HEADERS}
