class Templates:
    """Шаблоны для генерации файлов TypeScript"""

    import_line = "import {keyword}{{ {specifiers} }} from '{path}';"

    import_namespace = "import {keyword}* as {alias} from '{path}';"

    service = """export class {name}Service {{
\tapiName = '{api_name}';

\tconstructor(private restService: RestService) {{}}
{methods}
}}"""

    method = """
\t{name} = ({parameters}): Promise<{response_type}> =>
\t\tthis.restService.request<{request_type}, {response_type}>(
\t\t\t{{
{options}
\t\t\t}},
\t\t\t{{ apiName: this.apiName }},
\t\t);"""

    hook = """export const {keys_name} = {{
\tall: ['{key}'] as const,
\tlists: () => [...{keys_name}.all, 'list'] as const,
\tlist: (params?: unknown) => [...{keys_name}.lists(), params] as const,
\tdetails: () => [...{keys_name}.all, 'detail'] as const,
\tdetail: (id?: unknown) => [...{keys_name}.details(), id] as const,
}};

export function use{name}Service() {{
\tconst restService = useRestService();
\tconst queryClient = useQueryClient();
\tconst service = new {name}Service(restService);

\treturn {{
\t\tservice,{hooks}
\t}};
}}"""

    hook_query = """
\t\tuse{name}: ({parameters}) =>
\t\t\tuseQuery({{
\t\t\t\tqueryKey: {query_key},
\t\t\t\tqueryFn: () => service.{method}({arguments}),
\t\t\t}}),"""

    hook_mutation = """
\t\tuse{name}: () =>
\t\t\tuseMutation<{response_type}, Error, {variables_type}>({{
\t\t\t\tmutationFn: ({mutation_parameters}) => service.{method}({arguments}),
\t\t\t\tonSuccess: () => {{
\t\t\t\t\tqueryClient.invalidateQueries({{ queryKey: {keys_name}.all }});
\t\t\t\t}},
\t\t\t}}),"""

    interface = """export interface {identifier}{extends} {{
{properties}
}}"""

    enum = """export enum {name} {{
{members}
}}

export const {options_name} = [
{options}
];"""

    warning = """# Proxy

This folder is generated from the backend API definition.

Any manual change will be lost on the next generation. Regenerate it with:

```
proxy-generator --all
```
"""


templates = Templates()
